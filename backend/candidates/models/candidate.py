"""
Candidate model.

WHAT: SQLAlchemy model for a candidate registered in an election.

WHY: Candidates are the only records this service owns. Parties and
elections belong to their own services, so party_id and election_id are
plain integers with no foreign keys; the service checks them against the
peer services when a candidate is written.

HOW: The (number_election, election_id) pair is indexed but deliberately
not unique at the database level. Uniqueness is a service rule checked
before each write.
"""

from sqlalchemy import Column, Index, Integer, BigInteger, String
from sqlalchemy.orm import Mapped

from candidates.models.base import Base, TimestampMixin


class Candidate(TimestampMixin, Base):
    """
    Registered election candidate.

    Attributes:
        id: Primary key, assigned on creation
        name: Full name (first and last name)
        party_id: Party record in the Party service
        election_id: Election record in the Election service
        number_election: Registration number, prefixed by the party number
        created_at: Record creation timestamp
        updated_at: Last modification timestamp
    """

    __tablename__ = "candidates"
    __table_args__ = (
        Index("ix_candidates_number_election_election_id", "number_election", "election_id"),
    )

    # SQLite only autoincrements INTEGER primary keys
    id: Mapped[int] = Column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True
    )

    name: Mapped[str] = Column(
        String(255),
        nullable=False,
        comment="Candidate full name",
    )
    party_id: Mapped[int] = Column(
        BigInteger,
        nullable=False,
        index=True,
        comment="Party id in the Party service",
    )
    election_id: Mapped[int] = Column(
        BigInteger,
        nullable=False,
        index=True,
        comment="Election id in the Election service",
    )
    number_election: Mapped[int] = Column(
        BigInteger,
        nullable=False,
        comment="Election registration number, prefixed by the party number",
    )

    def __repr__(self) -> str:
        return (
            f"<Candidate(id={self.id}, name='{self.name}', "
            f"number_election={self.number_election}, election_id={self.election_id})>"
        )
