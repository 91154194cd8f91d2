"""
Document DAO

Purpose
-------
Persists `Document` rows (binary content owned by a user) using the generic
CRUD operations of `BaseDao`. Deleting a document does not cascade to its
transactions; the database's foreign key decides whether the delete succeeds.
"""

from identity_vault.database.daos.base_dao import BaseDao
from identity_vault.database.entities.document import Document


class DocumentDao(BaseDao):
    """
    Data Access Object (DAO) for managing Document entities.
    """

    entity = Document
