"""deployctl — group deployment environments under a project."""

__version__ = "0.1.0"
