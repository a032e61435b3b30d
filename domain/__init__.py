"""
Domain layer - ORM models, the database handle, and request/response schemas.
"""

from domain import models, schemas

__all__ = ["models", "schemas"]
