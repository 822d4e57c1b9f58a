"""JSON HTTP server for users and products, with flash-sale and order storage in SQLite."""

__version__ = "0.1.0"