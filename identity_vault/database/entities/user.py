"""
User ORM Model
==============

The ``User`` ORM model represents a registered person. It maps to the
``app_user`` table and holds identity details and the hashed password.

Key features
~~~~~~~~~~~~
- Auto-increment integer primary key (``id``)
- Unique email address, used as the login identifier
- Optional identity documents (Aadhaar, PAN) and a profile image blob
- bcrypt password hash, never the plaintext (hashing happens in ``UserDao``)
- One-to-many relationship to ``Document`` through ``document.owner_id``
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import VARCHAR, TEXT, Date, Integer, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column, relationship

from identity_vault.database.config.connection_engine import declarativeBase
from identity_vault.database.entities.mixins import TimestampMixin


class User(TimestampMixin, declarativeBase):
    """
    ORM model for the `app_user` table.

    Attributes
    ----------
    id : int
        Primary key, generated by the database.
    name : str | None
        Display name.
    email : str | None
        Email address (unique).
    phone_number, login_pin, aadhaar_number, pan_number : str | None
        Contact and identity details.
    date_of_birth : date | None
        Date of birth.
    user_image : bytes | None
        Raw profile image.
    password : str | None
        bcrypt hash of the user's password.
    """

    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(VARCHAR(255))
    email: Mapped[Optional[str]] = mapped_column(VARCHAR(255), unique=True)
    phone_number: Mapped[Optional[str]] = mapped_column(VARCHAR(32))
    login_pin: Mapped[Optional[str]] = mapped_column(VARCHAR(255))
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date)
    aadhaar_number: Mapped[Optional[str]] = mapped_column(VARCHAR(32))
    pan_number: Mapped[Optional[str]] = mapped_column(VARCHAR(32))
    user_image: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
    password: Mapped[Optional[str]] = mapped_column(TEXT)

    documents: Mapped[List["Document"]] = relationship(back_populates="owner", passive_deletes="all")

    def __str__(self) -> str:
        return f"User: id:{self.id}, name: {self.name}, email: {self.email}"
