"""Product API: CRUD service for products stored in a document database."""

__version__ = "1.0.0"
