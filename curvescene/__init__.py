"""Curves, splines, shapes, OBJ loading, transforms, a camera and a small scene graph for 3D rendering."""

__version__ = "0.1.0"