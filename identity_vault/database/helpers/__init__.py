"""
The `helpers` package provides utility functions and decorators
that support database operations and cross-cutting concerns.

Contents
--------
- transactionManagement
    Provides the `@transactional` decorator:
        - Opens a session from the explicit `Database` handle passed as first argument
        - Reuses a session supplied by the caller instead, when given
        - Commits on success, rolls back on errors, always closes
"""
