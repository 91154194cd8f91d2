"""
DID ORM Model
=============

A decentralized identifier stored as-is. The identifier string is the primary
key and is always supplied by the caller; the service never generates one.
Resources hang off a DID through ``resource.did_id``.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import VARCHAR, TEXT, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from identity_vault.database.config.connection_engine import declarativeBase
from identity_vault.database.entities.mixins import TimestampMixin


class DID(TimestampMixin, declarativeBase):
    """
    ORM model for the `did` table.

    Attributes
    ----------
    id : str
        The DID itself (e.g. ``did:example:123456``).
    controller : str | None
        DID of the controlling party.
    created, updated : datetime | None
        Timestamps carried by the DID document.
    did_document : str | None
        Serialized DID document.
    """

    __tablename__ = "did"

    id: Mapped[str] = mapped_column(VARCHAR(255), primary_key=True)
    controller: Mapped[Optional[str]] = mapped_column(VARCHAR(255))
    created: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    updated: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    did_document: Mapped[Optional[str]] = mapped_column(TEXT)

    resources: Mapped[List["Resource"]] = relationship(back_populates="did", passive_deletes="all")

    def __str__(self) -> str:
        return f"DID: id:{self.id}, controller: {self.controller}"
