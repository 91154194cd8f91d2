"""
Database Transaction Management
===============================

This module provides a decorator-based transaction wrapper around the explicit
`Database` storage handle.

Functions decorated with ``@transactional`` take the handle as their first
argument; the decorator opens a session from it and passes that session to the
function as the ``session`` keyword argument.

Key features
~~~~~~~~~~~~
- Reuse of a session the caller already holds (``session=`` keyword)
- Automatic commit and rollback handling
- Clean session closure after execution
"""

from functools import wraps


def transactional(func):
    """
    Decorator to wrap functions in a managed SQLAlchemy transaction.

    Ensures that:
    - If the caller passes ``session=``, it is used as-is and left open
      (the caller owns its lifecycle).
    - Otherwise, a new session is opened from the given `Database`,
      committed, and closed.
    - On errors, the session is rolled back and closed.

    Parameters
    ----------
    func : callable
        The function to wrap. Its signature must be
        ``func(database, *args, session, **kwargs)``.

    Returns
    -------
    callable
        The wrapped function, executed within a database transaction.

    Example
    -------
    >>> @transactional
    ... def count_users(database, session=None):
    ...     return session.query(User).count()
    ...
    >>> count_users(app.state.database)
    """
    @wraps(func)
    def wrap_func(database, *args, session=None, **kwargs):
        if session is not None:
            return func(database, *args, session=session, **kwargs)

        session = database.session()
        try:
            result = func(database, *args, session=session, **kwargs)
            session.flush()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

        return result

    return wrap_func
