"""SQLAlchemy ORM model for the documents table."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class DocumentModel(Base, TimestampMixin):
    """ORM model for documents table.

    Note: Deleting a user deletes the documents they own.
    """

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey(
            "users.id", ondelete="CASCADE", name="fk_documents_owner_id_users"
        ),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<DocumentModel(id={self.id}, title={self.title}, "
            f"owner_id={self.owner_id})>"
        )
