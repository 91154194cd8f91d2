"""
Pydantic models used for request/response validation and API data contracts.

Each entity has three shapes:
- ``<Entity>Create``: body of ``POST /<entities>``
- ``<Entity>Update``: body of ``PUT /<entities>/{id}``; every field optional,
  only the fields sent are applied
- ``<Entity>Read``: response row, built from the ORM object

Binary columns travel as base64 strings. Unknown body fields are ignored.
These models also drive the OpenAPI schema served at ``/api-docs``.
"""

import base64
import binascii
from datetime import date, datetime
from typing import Annotated, Any, ClassVar, FrozenSet, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, WithJsonSchema, field_validator


def _decode_base64(value):
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("must be a base64-encoded string") from e
    return value


def _encode_base64(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


Base64Blob = Annotated[
    bytes,
    BeforeValidator(_decode_base64),
    PlainSerializer(_encode_base64, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "base64"}),
]
"""Binary column exchanged as a base64 string."""


BCRYPT_MAX_PASSWORD_BYTES = 72
"""bcrypt only accepts passwords up to 72 bytes."""


def _check_password_length(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
    return value


class ErrorMessage(BaseModel):
    """Body of every error response."""
    error: str = Field(..., examples=["Resource not found"])


class WriteModel(BaseModel):
    """Base for request bodies that map onto a table row."""

    transient_fields: ClassVar[FrozenSet[str]] = frozenset()
    """Fields accepted in the body but never persisted."""

    def to_row(self) -> dict:
        """Column values sent by the client, minus transient fields."""
        return self.model_dump(exclude_unset=True, exclude=set(self.transient_fields))


class ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

class RegisterDetails(BaseModel):
    """
    Represents data required to register a new user.
    """
    name: str = Field(..., examples=["John Doe"])
    """Display name."""
    email: str = Field(..., examples=["john.doe@example.com"])
    """Email address, used to log in."""
    password: str = Field(..., examples=["s3cret"])
    """Plaintext password; stored as a bcrypt hash."""

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value):
        return _check_password_length(value)


class LoginCredentials(BaseModel):
    """
    Represents login credentials for a user.
    """
    email: str = Field(..., examples=["john.doe@example.com"])
    password: str = Field(..., examples=["s3cret"])


class TokenResponse(BaseModel):
    """Bearer token returned by a successful login."""
    token: str


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

class UserFields(WriteModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    login_pin: Optional[str] = None
    date_of_birth: Optional[date] = None
    aadhaar_number: Optional[str] = None
    pan_number: Optional[str] = None
    user_image: Optional[Base64Blob] = None
    password: Optional[str] = Field(None, description="Plaintext password; stored as a bcrypt hash.")

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value):
        return _check_password_length(value)


class UserCreate(UserFields):
    """Body of ``POST /users``."""
    model_config = ConfigDict(json_schema_extra={"example": {"name": "John Doe", "email": "john.doe@example.com"}})

    name: str
    email: str


class UserUpdate(UserFields):
    """Body of ``PUT /users/{id}``."""


class UserRead(ReadModel):
    """
    A stored user. ``password`` is the bcrypt hash.
    """
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    login_pin: Optional[str] = None
    date_of_birth: Optional[date] = None
    aadhaar_number: Optional[str] = None
    pan_number: Optional[str] = None
    user_image: Optional[Base64Blob] = None
    password: Optional[str] = None


# ---------------------------------------------------------------------------
# DID
# ---------------------------------------------------------------------------

class DIDFields(WriteModel):
    controller: Optional[str] = Field(None, examples=["did:example:controller"])
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    did_document: Optional[str] = Field(None, description="Serialized DID document.")


class DIDCreate(DIDFields):
    """Body of ``POST /dids``. The identifier is chosen by the caller."""
    id: str = Field(..., examples=["did:example:123456"])


class DIDUpdate(DIDFields):
    """Body of ``PUT /dids/{id}``."""


class DIDRead(ReadModel):
    id: str
    controller: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    did_document: Optional[str] = None


# ---------------------------------------------------------------------------
# Resource
# ---------------------------------------------------------------------------

class ResourceFields(WriteModel):
    payload: Optional[str] = Field(None, examples=["{\"type\": \"schema\"}"])
    did_id: Optional[str] = Field(None, description="DID owning the resource.", examples=["did:example:123456"])


class ResourceCreate(ResourceFields):
    """Body of ``POST /resources``. The identifier is chosen by the caller."""
    id: str = Field(..., examples=["res-1"])


class ResourceUpdate(ResourceFields):
    """Body of ``PUT /resources/{id}``."""


class ResourceRead(ReadModel):
    id: str
    payload: Optional[str] = None
    did_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class DocumentFields(WriteModel):
    content: Optional[Base64Blob] = Field(None, description="Document bytes, base64-encoded.")
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    owner_id: Optional[int] = Field(None, description="Owning user id.", examples=[1])


class DocumentCreate(DocumentFields):
    """Body of ``POST /documents``."""


class DocumentUpdate(DocumentFields):
    """Body of ``PUT /documents/{id}``."""


class DocumentRead(ReadModel):
    id: int
    content: Optional[Base64Blob] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    owner_id: Optional[int] = None


# ---------------------------------------------------------------------------
# DocumentTransaction
# ---------------------------------------------------------------------------

class DocumentTransactionFields(WriteModel):
    transient_fields: ClassVar[FrozenSet[str]] = frozenset({"user_id"})

    transaction_data: Optional[Any] = Field(None, examples=[{"action": "signed"}])
    document_id: Optional[int] = Field(None, examples=[1])
    user_id: Optional[int] = Field(
        None,
        description="Acting user. Accepted for compatibility; not stored.",
        examples=[1],
    )


class DocumentTransactionCreate(DocumentTransactionFields):
    """Body of ``POST /documenttransactions``."""


class DocumentTransactionUpdate(DocumentTransactionFields):
    """Body of ``PUT /documenttransactions/{id}``."""


class DocumentTransactionRead(ReadModel):
    id: int
    transaction_data: Optional[Any] = None
    document_id: Optional[int] = None
