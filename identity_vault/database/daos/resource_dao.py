"""DAO for `Resource` rows."""

from identity_vault.database.daos.base_dao import BaseDao
from identity_vault.database.entities.resource import Resource


class ResourceDao(BaseDao):
    entity = Resource
