"""SQLAlchemy async persistence: engine/session wrapper, models, repositories, seeding."""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "Database"]
