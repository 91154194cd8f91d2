"""DAO for `DocumentTransaction` rows."""

from identity_vault.database.daos.base_dao import BaseDao
from identity_vault.database.entities.document_transaction import DocumentTransaction


class DocumentTransactionDao(BaseDao):
    entity = DocumentTransaction
