"""
Database models package.

WHY: Centralizing model imports ensures Alembic can discover all models
for migration generation and makes it easier to import models elsewhere.
"""

from candidates.models.base import Base, TimestampMixin
from candidates.models.candidate import Candidate

__all__ = [
    "Base",
    "TimestampMixin",
    "Candidate",
]
