"""
Data Access Object (DAO) package.

WHY: DAOs provide a clean separation between database operations and business logic,
making the codebase more testable and maintainable.
"""

from candidates.dao.base import BaseDAO
from candidates.dao.candidate import CandidateDAO

__all__ = [
    "BaseDAO",
    "CandidateDAO",
]
