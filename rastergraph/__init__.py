"""Software rasterizer for lines, curves and lit 3D shapes, driven by a drawing script."""

__version__ = "0.1.0"
__all__ = ["__version__"]