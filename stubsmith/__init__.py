"""stubsmith -- convention-driven scaffolding for CRUD API backends."""

__version__ = "0.1.0"
