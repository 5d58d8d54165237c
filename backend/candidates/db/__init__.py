"""Database package"""

from candidates.db.session import AsyncSessionLocal, engine, get_db
from candidates.models.base import Base

__all__ = ["Base", "AsyncSessionLocal", "engine", "get_db"]
