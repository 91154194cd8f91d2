"""DAO for `DID` rows. Identifiers are caller-supplied strings."""

from identity_vault.database.daos.base_dao import BaseDao
from identity_vault.database.entities.did import DID


class DIDDao(BaseDao):
    entity = DID
