"""
Document ORM Model
==================

The ``Document`` ORM model stores a binary document owned by a ``User``.

Key features
~~~~~~~~~~~~
- Auto-increment integer primary key (``id``)
- Raw content blob (``content``)
- Caller-supplied ``created`` / ``updated`` timestamps
- Foreign key to ``app_user.id`` (``owner_id``), set to NULL when the owner is deleted
- One-to-many relationship to ``DocumentTransaction``
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column, relationship

from identity_vault.database.config.connection_engine import declarativeBase
from identity_vault.database.entities.mixins import TimestampMixin


class Document(TimestampMixin, declarativeBase):
    """
    ORM model for the `document` table.

    Attributes
    ----------
    id : int
        Primary key, generated by the database.
    content : bytes | None
        Raw document bytes.
    created, updated : datetime | None
        Document-level timestamps supplied by the client.
    owner_id : int | None
        Foreign key to the owning user (`app_user.id`).
    """

    __tablename__ = "document"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
    created: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    updated: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    owner_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("app_user.id", ondelete="SET NULL", onupdate="CASCADE"))

    owner: Mapped[Optional["User"]] = relationship(back_populates="documents")
    transactions: Mapped[List["DocumentTransaction"]] = relationship(back_populates="document", passive_deletes="all")

    def __str__(self) -> str:
        return f"Document: id:{self.id}, owner_id: {self.owner_id}"
