"""
User DAO

Purpose
-------
Data-access layer for the `User` ORM entity. On top of the generic CRUD
operations it provides:
- Password hashing on create and on update, so the table only ever holds
  bcrypt hashes
- Lookup by email (the login identifier)

Usage
-----
.. code-block:: python

    from identity_vault.database.daos.user_dao import UserDao

    dao = UserDao()
    with database.session() as session:
        user = dao.createRecord(session, {"name": "A", "email": "a@x.com", "password": "pw"})
        session.commit()
        dao.fetchUserByEmail(session, "a@x.com")
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from identity_vault.crypt.encrypt_decrypt import EncryptionDec
from identity_vault.database.daos.base_dao import BaseDao
from identity_vault.database.entities.user import User

logger = logging.getLogger(__name__)


class UserDao(BaseDao):
    """
    Data Access Object (DAO) for managing User entities.
    """

    entity = User

    def __init__(self, enc: Optional[EncryptionDec] = None):
        self.enc = enc or EncryptionDec()

    def _hash_password(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("password") is None:
            return data
        data = dict(data)
        data["password"] = self.enc.hash_password(text=data["password"])
        return data

    def createRecord(self, session: Session, data: Dict[str, Any]) -> User:
        """Create a user, hashing the plaintext password first."""
        return super().createRecord(session, self._hash_password(data))

    def updateRecord(self, session: Session, record: User, changes: Dict[str, Any]) -> User:
        """Update a user; a new plaintext password is hashed before it is stored."""
        return super().updateRecord(session, record, self._hash_password(changes))

    def fetchUserByEmail(self, session: Session, email: str) -> Optional[User]:
        """
        Fetch a user by email.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        email : str
            Email address of the user.

        Returns
        -------
        User | None
            The matching user, or None.
        """
        try:
            return session.query(User).filter(User.email == email).limit(1).one_or_none()
        except Exception as e:
            logger.error("Error in UserDao.fetchUserByEmail. Error Message: %s", e)
            raise
