"""SQLAlchemy ORM model for the labs table.

The labs table is the tenant registry. It lives in the public schema; each
lab's document content lives in its own ``tenant_<prefix>`` schema.
"""

from datetime import date

from sqlalchemy import Date, Index, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class LabModel(Base, TimestampMixin):
    """ORM model for labs table.

    Note: Prefixes are unique regardless of case; the functional index on
    ``lower(document_id_prefix)`` enforces it.
    """

    __tablename__ = "labs"

    document_id_prefix: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    lab_category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    operating_hours: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    director_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    quality_manager_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    selected_departments: Mapped[list[str]] = mapped_column(
        JSONB, nullable=False, default=list
    )
    issue_no: Mapped[str] = mapped_column(String(20), nullable=False, default="01")
    issue_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    lab_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active"
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<LabModel(document_id_prefix={self.document_id_prefix}, "
            f"name={self.name}, lab_status={self.lab_status})>"
        )


Index(
    "ix_labs_document_id_prefix_lower",
    func.lower(LabModel.document_id_prefix),
    unique=True,
)
