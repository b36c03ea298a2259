"""create_chef_profiles_table

Revision ID: 4b7e2c91d0a3
Revises:
Create Date: 2026-10-19 09:12:44.310582

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4b7e2c91d0a3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create chef_profiles table."""
    op.create_table('chef_profiles',
        sa.Column('owner_id', sa.UUID(), nullable=False),
        sa.Column('chef_name', sa.String(length=100), nullable=False),
        sa.Column('experience_level', sa.Integer(), nullable=False),
        sa.Column('cuisine_specialties', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('signature_dishes', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('recipe_collection', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('experience_level BETWEEN 2 AND 75', name='ck_chef_profiles_experience_level'),
        sa.PrimaryKeyConstraint('owner_id'),
    )


def downgrade() -> None:
    """Drop chef_profiles table."""
    op.drop_table('chef_profiles')
