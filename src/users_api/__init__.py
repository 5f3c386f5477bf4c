"""In-memory users CRUD service."""

__version__ = "0.1.0"
