"""
Entities Package — SQLAlchemy 2.0 ORM Models
============================================

The `entities` package defines the ORM models of the application, mapping
database tables to Python classes using SQLAlchemy 2.0-typed mappings.
These classes form the persistence backbone and are consumed by DAOs
(`daos` package) to perform CRUD operations.

Tech Stack & Conventions
------------------------
- PostgreSQL in production, SQLite for tests
- Timezone-aware row timestamps (UTC) via `TimestampMixin`
- SQLAlchemy 2.0 style `Mapped[...]` + `mapped_column(...)`
- Explicit foreign keys for relational integrity

Contents
--------
- User (`app_user`)
    Registered person; owns many Documents.
- DID (`did`)
    Decentralized identifier, caller-supplied string key; owns many Resources.
- Resource (`resource`)
    Text payload attached to a DID (`did_id` → did.id).
- Document (`document`)
    Binary content owned by a user (`owner_id` → app_user.id); owns many
    DocumentTransactions.
- DocumentTransaction (`document_transaction`)
    JSON transaction record (`document_id` → document.id). No user relation.

The models are declared statically in `ENTITIES`; importing this package is
what registers every table on the shared metadata.
"""

from identity_vault.database.entities.user import User
from identity_vault.database.entities.did import DID
from identity_vault.database.entities.resource import Resource
from identity_vault.database.entities.document import Document
from identity_vault.database.entities.document_transaction import DocumentTransaction

ENTITIES = (User, DID, Resource, Document, DocumentTransaction)

__all__ = ["User", "DID", "Resource", "Document", "DocumentTransaction", "ENTITIES"]
