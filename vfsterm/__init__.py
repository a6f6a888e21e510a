"""In-memory virtual file system with reference-counted files and a small command-line shell."""

__version__ = "0.1.0"
__all__ = ["__version__"]