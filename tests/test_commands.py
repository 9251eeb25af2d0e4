import pytest

from meshview.commands import Command, MoveCommand, RotateCommand, ScaleCommand
from meshview.model import Model

CUBE = """\
v -1 -1 -1
v -1 -1 1
v -1 1 -1
v -1 1 1
v 1 -1 -1
v 1 -1 1
v 1 1 -1
v 1 1 1
f 1 2 4 3
f 5 6 8 7
f 1 2 6 5
f 3 4 8 7
f 1 3 7 5
f 2 4 8 6
"""


@pytest.fixture
def cube(tmp_path):
    path = tmp_path / "cube.obj"
    path.write_text(CUBE)
    model = Model()
    model.load_from_file(path)
    return model


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_move_command(cube):
    command: Command = MoveCommand(1.0, 0.0, 0.0)
    command.execute(cube)
    assert cube.vertices[0].x == pytest.approx(0.0)


def test_scale_command(cube):
    command: Command = ScaleCommand(2.0)
    command.execute(cube)
    assert cube.vertices[0].x == pytest.approx(-2.0)


def test_rotate_command(cube):
    command: Command = RotateCommand(90.0, 0.0, 0.0)
    command.execute(cube)
    assert cube.vertices[0].z == pytest.approx(-1.0, abs=1e-5)


def test_commands_can_be_run_again(cube):
    command = MoveCommand(0.5, 0.0, 0.0)
    command.execute(cube)
    command.execute(cube)
    assert cube.vertices[0].x == pytest.approx(0.0)


def test_commands_are_immutable(cube):
    command = ScaleCommand(2.0)
    with pytest.raises(AttributeError):
        command.factor = 3.0
    command.execute(cube)
    assert cube.vertices[0].x == pytest.approx(-2.0)
    assert cube.vertices[7].z == pytest.approx(2.0)