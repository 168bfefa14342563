[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvescene"
version = "0.1.0"
description = "Curves, splines, transforms, cameras and a small scene graph for 3D rendering, with no windowing or GPU code"
requires-python = ">=3.10"
keywords = ["bezier", "hermite", "catmull-rom", "spline", "scene graph", "camera", "obj", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["curvescene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
