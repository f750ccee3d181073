"""Todo API: a thin REST layer over a document store."""

__version__ = "1.0.0"
