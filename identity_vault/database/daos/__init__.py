"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package provides the Data Access Layer for the application.
It encapsulates all interactions with SQLAlchemy ORM entities, providing
clean CRUD APIs for the service layer while hiding direct query details.

Conventions
-----------
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs surface exceptions so upper layers decide error policy
- Every DAO exposes `createRecord`, `fetchAll`, `fetchById`, `updateRecord`
  and `deleteRecord` (see `BaseDao`)

Contents
--------
- BaseDao
    Generic repository over one ORM class.
- UserDao
    * Hashes passwords on create and update
    * Fetches users by email
- DIDDao, ResourceDao, DocumentDao, DocumentTransactionDao
    Plain repositories for the remaining entities.
"""
