"""Controller that turns user requests into commands on a model."""

from __future__ import annotations

import os

from .commands import MoveCommand, RotateCommand, ScaleCommand
from .model import Model


class Controller:
    """Dispatches load and transformation requests to a model."""

    def __init__(self, model: Model | None = None) -> None:
        self._model = model if model is not None else Model()

    @property
    def model(self) -> Model:
        return self._model

    def load_model(self, path: str | os.PathLike[str]) -> None:
        self._model.load_from_file(path)

    def move_model(self, dx: float, dy: float, dz: float) -> None:
        MoveCommand(dx, dy, dz).execute(self._model)

    def rotate_model(self, angle_x: float, angle_y: float, angle_z: float) -> None:
        RotateCommand(angle_x, angle_y, angle_z).execute(self._model)

    def scale_model(self, factor: float) -> None:
        ScaleCommand(factor).execute(self._model)