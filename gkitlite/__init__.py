"""Points, vectors, transforms, colors, image writing and Wavefront OBJ/MTL loading for simple renderers."""

__version__ = "0.1.0"