"""Load OBJ wireframe meshes and move, rotate and scale them with affine operations."""

__version__ = "0.1.0"
__all__ = ["affine", "commands", "controller", "geometry", "model", "obj_loader"]