"""
Base DAO

Purpose
-------
Generic data-access layer shared by every entity DAO. Provides the five
repository operations the API exposes:
- createRecord: stage and flush a new row
- fetchAll: every row of the table
- fetchById: one row by primary key (or None)
- updateRecord: apply a partial set of column values
- deleteRecord: remove a row

Design
------
- The DAO expects an active SQLAlchemy `Session` supplied by the caller.
  Commit/rollback belongs to the service layer (`@transactional`).
- Creates and updates are flushed so constraint violations surface inside the
  DAO call and generated values (auto-increment ids, timestamps) are loaded.
- Subclasses set `entity` to the ORM class they manage.

Error Handling
--------------
- Each method logs the failing operation and re-raises; upper layers decide
  which HTTP status a failure maps to.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class BaseDao:
    """
    Data Access Object (DAO) base class.
    Provides CRUD operations on the table mapped by `entity`.
    """

    entity = None
    """ORM class managed by the DAO."""

    @property
    def entity_name(self) -> str:
        return self.entity.__name__

    def createRecord(self, session: Session, data: Dict[str, Any]):
        """
        Create a new row from a mapping of column values.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        data : dict
            Column values for the new row.

        Returns
        -------
        entity
            The persisted (flushed and refreshed) instance.
        """
        try:
            record = self.entity(**data)
            session.add(record)
            session.flush()
            session.refresh(record)
            return record
        except Exception as e:
            logger.error("Error in %sDao.createRecord. Error Message: %s", self.entity_name, e)
            raise

    def fetchAll(self, session: Session) -> List[Any]:
        """Return every row, ordered by primary key."""
        try:
            return session.query(self.entity).order_by(*self.entity.__mapper__.primary_key).all()
        except Exception as e:
            logger.error("Error in %sDao.fetchAll. Error Message: %s", self.entity_name, e)
            raise

    def fetchById(self, session: Session, record_id) -> Optional[Any]:
        """
        Fetch a row by primary key.

        Returns
        -------
        entity | None
            The row, or None if no row has that key.
        """
        try:
            return session.get(self.entity, record_id)
        except Exception as e:
            logger.error("Error in %sDao.fetchById (id=%s). Error Message: %s", self.entity_name, record_id, e)
            raise

    def updateRecord(self, session: Session, record, changes: Dict[str, Any]):
        """
        Apply `changes` to an already loaded row and flush.

        Only the keys present in `changes` are touched.
        """
        try:
            for key, value in changes.items():
                setattr(record, key, value)
            session.flush()
            session.refresh(record)
            return record
        except Exception as e:
            logger.error("Error in %sDao.updateRecord. Error Message: %s", self.entity_name, e)
            raise

    def deleteRecord(self, session: Session, record) -> None:
        """Delete an already loaded row and flush."""
        try:
            session.delete(record)
            session.flush()
        except Exception as e:
            logger.error("Error in %sDao.deleteRecord. Error Message: %s", self.entity_name, e)
            raise
