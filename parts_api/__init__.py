"""In-memory parts dataset served over HTTP."""
__version__ = "1.0.0"
