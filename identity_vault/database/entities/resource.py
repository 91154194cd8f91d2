"""
Resource ORM Model
==================

Opaque payload attached to a DID. The string primary key is caller-supplied.
"""

from typing import Optional

from sqlalchemy import VARCHAR, TEXT, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from identity_vault.database.config.connection_engine import declarativeBase
from identity_vault.database.entities.mixins import TimestampMixin


class Resource(TimestampMixin, declarativeBase):
    __tablename__ = "resource"

    id: Mapped[str] = mapped_column(VARCHAR(255), primary_key=True)
    payload: Mapped[Optional[str]] = mapped_column(TEXT)
    did_id: Mapped[Optional[str]] = mapped_column(VARCHAR(255), ForeignKey("did.id", ondelete="SET NULL", onupdate="CASCADE"))
    """Foreign key to the owning DID (`did.id`); NULL once that DID is deleted."""

    did: Mapped[Optional["DID"]] = relationship(back_populates="resources")

    def __str__(self) -> str:
        return f"Resource: id:{self.id}, did_id: {self.did_id}"
