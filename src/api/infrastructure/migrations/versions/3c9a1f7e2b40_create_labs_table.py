"""create labs table

Revision ID: 3c9a1f7e2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c9a1f7e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "labs",
        sa.Column("document_id_prefix", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=False),
        sa.Column("state", sa.String(length=100), nullable=False),
        sa.Column("country", sa.String(length=100), nullable=False),
        sa.Column("postal_code", sa.String(length=20), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("lab_category", sa.String(length=100), nullable=True),
        sa.Column("operating_hours", sa.String(length=255), nullable=True),
        sa.Column("website_url", sa.String(length=500), nullable=True),
        sa.Column("director_name", sa.String(length=255), nullable=True),
        sa.Column("quality_manager_name", sa.String(length=255), nullable=True),
        sa.Column(
            "selected_departments",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "issue_no", sa.String(length=20), nullable=False, server_default="01"
        ),
        sa.Column("issue_date", sa.Date(), nullable=True),
        sa.Column(
            "lab_status",
            sa.String(length=20),
            nullable=False,
            server_default="active",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("document_id_prefix", name="labs_pkey"),
        sa.CheckConstraint(
            "type IN ('accredited', 'non-accredited')", name="ck_labs_type"
        ),
        sa.CheckConstraint(
            "lab_status IN ('active', 'inactive')", name="ck_labs_lab_status"
        ),
    )
    # Prefixes are unique regardless of case
    op.create_index(
        "ix_labs_document_id_prefix_lower",
        "labs",
        [sa.text("lower(document_id_prefix)")],
        unique=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_labs_document_id_prefix_lower", table_name="labs")
    op.drop_table("labs")
