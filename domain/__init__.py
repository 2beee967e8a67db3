"""
Domain layer - Business entities, models, schemas, and the session token type.
"""

from domain import models, schemas
from domain.session import SessionToken

__all__ = ["models", "schemas", "SessionToken"]
