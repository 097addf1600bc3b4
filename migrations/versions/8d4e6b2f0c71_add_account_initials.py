"""add_account_initials

Accounts without a picture show initials of their name.

Revision ID: 8d4e6b2f0c71
Revises: 3f1c2a9d7b10
Create Date: 2026-10-19 15:40:02.118347

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8d4e6b2f0c71"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column("accounts", sa.Column("initials", sa.String(8), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("accounts", "initials")
