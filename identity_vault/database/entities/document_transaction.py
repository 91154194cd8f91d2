"""
DocumentTransaction ORM Model
=============================

A free-form transaction record attached to a ``Document``. The table has no
foreign key to ``app_user``: the acting user is not modeled as a relation.
On PostgreSQL ``transaction_data`` is stored as JSONB, elsewhere as JSON.
"""

from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, Integer
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from identity_vault.database.config.connection_engine import declarativeBase
from identity_vault.database.entities.mixins import TimestampMixin


class DocumentTransaction(TimestampMixin, declarativeBase):
    __tablename__ = "document_transaction"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    transaction_data: Mapped[Optional[Any]] = mapped_column(JSON().with_variant(JSONB(), "postgresql"))
    document_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("document.id", ondelete="SET NULL", onupdate="CASCADE"))
    """Foreign key to the document this transaction belongs to (`document.id`); NULL once it is deleted."""

    document: Mapped[Optional["Document"]] = relationship(back_populates="transactions")

    def __str__(self) -> str:
        return f"DocumentTransaction: id:{self.id}, document_id: {self.document_id}"
