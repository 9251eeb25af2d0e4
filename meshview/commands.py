"""Commands that transform a model through affine strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .affine import MoveAffine, RotateAffine, ScaleAffine
from .model import Model


class Command(ABC):
    """An action to be carried out on a model."""

    @abstractmethod
    def execute(self, model: Model) -> None:
        """Carry out the action on the model."""


@dataclass(frozen=True)
class MoveCommand(Command):
    dx: float
    dy: float
    dz: float

    def execute(self, model: Model) -> None:
        model.apply_affine(MoveAffine(), self.dx, self.dy, self.dz)


@dataclass(frozen=True)
class RotateCommand(Command):
    angle_x: float
    angle_y: float
    angle_z: float

    def execute(self, model: Model) -> None:
        model.apply_affine(RotateAffine(), self.angle_x, self.angle_y, self.angle_z)


@dataclass(frozen=True)
class ScaleCommand(Command):
    factor: float

    def execute(self, model: Model) -> None:
        model.apply_affine(ScaleAffine(), self.factor, 0.0, 0.0)