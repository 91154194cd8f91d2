"""
Service-layer operations for the CRUD API, registration and login.

All functions are wrapped with the `@transactional` decorator, which opens a
SQLAlchemy session from the `Database` handle passed as first argument and
manages commit/rollback. Each function receives that session as the
`session` keyword argument.

The CRUD operations are generic: the caller picks the entity by passing its
DAO. Lookups that miss return ``None`` (or ``False`` for deletes) so the API
layer can answer 404.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from identity_vault.crypt.encrypt_decrypt import EncryptionDec
from identity_vault.database.daos.base_dao import BaseDao
from identity_vault.database.daos.user_dao import UserDao
from identity_vault.database.entities.user import User
from identity_vault.database.helpers.transactionManagement import transactional

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


@transactional
def create_record(database, dao: BaseDao, data: Dict[str, Any], session: Session = None):
    """Persist a new row through `dao` and return it."""
    return dao.createRecord(session, data)


@transactional
def list_records(database, dao: BaseDao, session: Session = None) -> List[Any]:
    """Return every row managed by `dao`. No pagination."""
    return dao.fetchAll(session)


@transactional
def get_record(database, dao: BaseDao, record_id, session: Session = None):
    """Return the row with primary key `record_id`, or None."""
    return dao.fetchById(session, record_id)


@transactional
def update_record(database, dao: BaseDao, record_id, changes: Dict[str, Any], session: Session = None):
    """
    Apply a partial update to one row.

    Parameters
    ----------
    database : Database
        Storage handle (consumed by @transactional).
    dao : BaseDao
        Repository of the target entity.
    record_id : int | str
        Primary key of the row.
    changes : dict
        Only the fields to change.
    session : Session
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    entity | None
        The updated row, or None when no row has that key.
    """
    record = dao.fetchById(session, record_id)
    if record is None:
        return None
    return dao.updateRecord(session, record, changes)


@transactional
def delete_record(database, dao: BaseDao, record_id, session: Session = None) -> bool:
    """Delete one row. Returns False when no row has that key."""
    record = dao.fetchById(session, record_id)
    if record is None:
        return False
    dao.deleteRecord(session, record)
    return True


@transactional
def register_user(database, name: str, email: str, password: str, session: Session = None) -> User:
    """
    Create a user from registration data.

    The password is hashed by `UserDao.createRecord` before insert. The
    returned row carries the hash, never the plaintext.
    """
    user = UserDao().createRecord(session, {"name": name, "email": email, "password": password})
    logger.info("Registered user id=%s", user.id)
    return user


@transactional
def login_user(database, email: str, password: str, session: Session = None) -> Dict[str, Any]:
    """
    Authenticate a user by email and password.

    Parameters
    ----------
    database : Database
        Storage handle (consumed by @transactional).
    email : str
        Email to authenticate.
    password : str
        Plaintext password to verify.
    session : Session
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    dict
        - authenticated (bool): True if credentials are valid.
        - detail (str): Error message, empty on success.
        - user_details (dict | None): ``{"id", "email"}`` on success.

    Notes
    -----
    An unknown email and a wrong password produce the same result, so the
    caller cannot tell whether an account exists.
    """
    user: Optional[User] = UserDao().fetchUserByEmail(session, email)
    enc = EncryptionDec()
    if user is None or not enc.check_passwords(password, user.password):
        return {"authenticated": False, "detail": INVALID_CREDENTIALS, "user_details": None}
    return {
        "authenticated": True,
        "detail": "",
        "user_details": {"id": user.id, "email": user.email},
    }
