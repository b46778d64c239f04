"""brandcn - copy brand SVG logos from a bundled library into your project."""

__version__ = "0.3.0"

__all__ = ["__version__"]
