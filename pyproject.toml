[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "gkitlite"
version = "0.1.0"
description = "Small toolkit for 3D graphics: points, vectors, transforms, colors, images and Wavefront OBJ/MTL loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "3d", "rendering", "obj", "wavefront", "mtl", "matrix", "image", "png", "bmp", "hdr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["gkitlite*"]

[tool.pytest.ini_options]
addopts = "-ra"
