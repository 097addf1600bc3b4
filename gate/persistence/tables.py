"""SQLAlchemy table definitions for Gate.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default="uuid_generate_v4()",
    ),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),  # Stored normalized
    Column("facebook_id", String(255), nullable=True),
    Column("picture_url", Text, nullable=True),
    Column("initials", String(8), nullable=True),  # Set while there is no picture
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One account per email, also under concurrent first logins
    UniqueConstraint("email", name="uq_accounts_email"),
)

Index("idx_accounts_facebook_id", accounts_table.c.facebook_id)
