"""A console library desk: a title-ordered book catalog with lending, returns and a text menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]