"""Create candidates table

Revision ID: 001
Revises:
Create Date: 2026-10-19

WHY: Candidates are the only table this service owns. Party and election
ids reference records in the peer services, so they carry no foreign keys.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create candidates table.

    The (number_election, election_id) index is not unique: uniqueness
    is checked by the candidate service before each write.
    """
    op.create_table(
        'candidates',
        sa.Column('id', sa.BigInteger(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, comment='Candidate full name'),
        sa.Column('party_id', sa.BigInteger(), nullable=False, comment='Party id in the Party service'),
        sa.Column('election_id', sa.BigInteger(), nullable=False, comment='Election id in the Election service'),
        sa.Column('number_election', sa.BigInteger(), nullable=False, comment='Election registration number, prefixed by the party number'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index('ix_candidates_id', 'candidates', ['id'])
    op.create_index('ix_candidates_party_id', 'candidates', ['party_id'])
    op.create_index('ix_candidates_election_id', 'candidates', ['election_id'])
    op.create_index(
        'ix_candidates_number_election_election_id',
        'candidates',
        ['number_election', 'election_id'],
    )


def downgrade() -> None:
    """Drop candidates table and its indexes."""
    op.drop_index('ix_candidates_number_election_election_id', table_name='candidates')
    op.drop_index('ix_candidates_election_id', table_name='candidates')
    op.drop_index('ix_candidates_party_id', table_name='candidates')
    op.drop_index('ix_candidates_id', table_name='candidates')
    op.drop_table('candidates')
