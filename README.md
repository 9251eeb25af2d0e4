# meshview

A small library that loads wireframe meshes from Wavefront OBJ files and
transforms them in place.

## Features

- Reads `v` (vertex) and `f` (face) records from OBJ text. All other records
  are ignored. A vertex line needs three numbers. Lines without them are
  skipped.
- Face tokens may take the forms `i`, `i/t`, `i/t/n` and `i//n`. Only the part
  before the first `/` is used. Positive indices are one-based. Negative
  indices count back from the vertices read so far. An index that does not
  name an existing vertex is dropped, and a face with no valid indices is
  skipped.
- Centres a loaded mesh on the middle of its bounding box. If the largest
  absolute coordinate read (`max_vertex`) is greater than 1, the mesh is also
  scaled by `2 / max_vertex`.
- Moves, rotates and scales a mesh through interchangeable affine strategies.
  Rotation angles are in degrees and are applied about X, then Y, then Z. A
  scale factor of zero leaves the vertices unchanged.
- Wraps each transformation in a command object, and a controller issues the
  commands.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Usage

```python
from meshview.model import Model
from meshview.controller import Controller

model = Model()
controller = Controller(model)      # Controller() creates its own Model

controller.load_model("cube.obj")   # raises OSError if the file cannot be opened
controller.move_model(1.0, 2.0, 3.0)
controller.rotate_model(90.0, 0.0, 0.0)
controller.scale_model(2.0)

print(len(model.vertices), len(model.faces), model.edge_count())
```

`Model.vertices` and `Model.faces` return tuples of `Vertex` and `Face`
records, taken from `meshview.geometry`. `Model.edge_count()` adds up half the
number of indices of each face, rounding down for each face.

`Model.max_vertex` starts as the largest absolute coordinate in the file. A
scale by a positive factor multiplies it by that factor. Moves and rotations
leave it as it is.

### Commands

Commands can be built on their own and run against any model:

```python
from meshview.commands import MoveCommand, RotateCommand, ScaleCommand

for command in (MoveCommand(1.0, 0.0, 0.0), RotateCommand(0.0, 90.0, 0.0), ScaleCommand(0.5)):
    command.execute(model)
```

### Strategies

To call the transformations directly, pass a strategy to the model:

```python
from meshview.affine import MoveAffine, RotateAffine, ScaleAffine

model.apply_affine(RotateAffine(), 0.0, 45.0, 0.0)
model.apply_affine(ScaleAffine(), 3.0, 0.0, 0.0)   # only the first parameter is used
```

New transformations can be added by subclassing `AffineStrategy`. Implement
`apply`, and override `update_max_vertex` if the transformation changes the
mesh's extent.

### Parsing only

```python
from meshview.obj_loader import load_obj, parse_obj, parse_vertex_index

data = load_obj("cube.obj")
data = parse_obj(["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1 2 3"])
print(data.vertices, data.faces, data.max_vertex)

parse_vertex_index("-1/2/3", 4)   # 3
parse_vertex_index("9", 4)        # None
```

`parse_obj` and `load_obj` return the raw geometry. They do not centre or
scale it.

## What it does not do

meshview is a library only. It does not draw meshes or open a window, and it
has no command-line program. It does not write OBJ files. It reads vertices
and faces only; texture coordinates, normals, groups and materials are
ignored.

## Running the tests

```
pytest
```