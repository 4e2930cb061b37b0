"""create category table

Revision ID: 001_create_category
Revises:
Create Date: 2024-03-13 17:30:14.832000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_create_category'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('label', sa.String(), nullable=False),
        sa.Column('parentId', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_category'),
        sa.ForeignKeyConstraint(
            ['parentId'],
            ['category.id'],
            name='fk_category_parent',
            ondelete='CASCADE',
            onupdate='NO ACTION',
        ),
    )


def downgrade() -> None:
    op.drop_table('category')
