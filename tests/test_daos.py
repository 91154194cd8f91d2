"""Tests for the DAOs and the @transactional service layer."""

import pytest
from sqlalchemy.exc import IntegrityError

from identity_vault.database.core.funcs import (
    create_record, delete_record, get_record, list_records, login_user, register_user, update_record,
)
from identity_vault.database.daos.did_dao import DIDDao
from identity_vault.database.daos.document_dao import DocumentDao
from identity_vault.database.daos.resource_dao import ResourceDao
from identity_vault.database.daos.user_dao import UserDao
from identity_vault.database.entities import DID, User
from identity_vault.database.helpers.transactionManagement import transactional


class TestUserDao:
    """UserDao stores hashes and finds users by email."""

    def test_create_hashes_password(self, database):
        with database.session() as session:
            user = UserDao().createRecord(session, {"name": "A", "email": "a@x.com", "password": "pw"})
            session.commit()

            assert user.id is not None
            assert user.password != "pw"
            assert user.password.startswith("$2")

    def test_update_hashes_new_password(self, database):
        dao = UserDao()
        with database.session() as session:
            user = dao.createRecord(session, {"name": "A", "email": "a@x.com", "password": "pw"})
            old_hash = user.password
            dao.updateRecord(session, user, {"password": "new"})
            session.commit()

            assert user.password not in (old_hash, "new")

    def test_update_without_password_keeps_hash(self, database):
        dao = UserDao()
        with database.session() as session:
            user = dao.createRecord(session, {"name": "A", "email": "a@x.com", "password": "pw"})
            old_hash = user.password
            dao.updateRecord(session, user, {"name": "B"})

            assert user.name == "B"
            assert user.password == old_hash

    def test_fetch_user_by_email(self, database):
        dao = UserDao()
        with database.session() as session:
            dao.createRecord(session, {"name": "A", "email": "a@x.com"})
            session.commit()

            assert dao.fetchUserByEmail(session, "a@x.com").name == "A"
            assert dao.fetchUserByEmail(session, "nobody@x.com") is None

    def test_duplicate_email_violates_constraint(self, database):
        dao = UserDao()
        with database.session() as session:
            dao.createRecord(session, {"name": "A", "email": "a@x.com"})
            with pytest.raises(IntegrityError):
                dao.createRecord(session, {"name": "B", "email": "a@x.com"})


class TestBaseDao:
    """Generic repository operations."""

    def test_fetch_by_id_miss_returns_none(self, database):
        with database.session() as session:
            assert DocumentDao().fetchById(session, 42) is None

    def test_fetch_all_ordered_by_key(self, database):
        dao = DIDDao()
        with database.session() as session:
            dao.createRecord(session, {"id": "did:example:b"})
            dao.createRecord(session, {"id": "did:example:a"})
            session.commit()

            assert [d.id for d in dao.fetchAll(session)] == ["did:example:a", "did:example:b"]

    def test_timestamps_set(self, database):
        with database.session() as session:
            did = DIDDao().createRecord(session, {"id": "did:example:1"})

            assert did.created_at is not None
            assert did.updated_at is not None

    def test_foreign_key_enforced(self, database):
        with database.session() as session:
            with pytest.raises(IntegrityError):
                ResourceDao().createRecord(session, {"id": "res-1", "did_id": "did:example:missing"})

    def test_delete(self, database):
        dao = DIDDao()
        with database.session() as session:
            did = dao.createRecord(session, {"id": "did:example:1"})
            dao.deleteRecord(session, did)
            session.commit()

            assert dao.fetchById(session, "did:example:1") is None


class TestTransactional:
    """The decorator commits on success and rolls back on failure."""

    def test_commits(self, database):
        create_record(database, DIDDao(), {"id": "did:example:1"})

        with database.session() as session:
            assert session.get(DID, "did:example:1") is not None

    def test_rolls_back_on_error(self, database):
        @transactional
        def create_then_fail(database, session=None):
            DIDDao().createRecord(session, {"id": "did:example:1"})
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            create_then_fail(database)

        with database.session() as session:
            assert session.get(DID, "did:example:1") is None

    def test_reuses_caller_session(self, database):
        with database.session() as session:
            create_record(database, DIDDao(), {"id": "did:example:1"}, session=session)
            session.rollback()

            assert session.get(DID, "did:example:1") is None


class TestServiceFunctions:
    """CRUD and auth service functions."""

    def test_crud_cycle(self, database):
        dao = DIDDao()
        create_record(database, dao, {"id": "did:example:1", "controller": "c1"})

        assert [d.id for d in list_records(database, dao)] == ["did:example:1"]
        assert get_record(database, dao, "did:example:1").controller == "c1"
        assert update_record(database, dao, "did:example:1", {"controller": "c2"}).controller == "c2"
        assert delete_record(database, dao, "did:example:1") is True
        assert delete_record(database, dao, "did:example:1") is False
        assert update_record(database, dao, "did:example:1", {"controller": "c3"}) is None
        assert get_record(database, dao, "did:example:1") is None

    def test_register_and_login(self, database):
        user = register_user(database, name="A", email="a@x.com", password="pw")

        assert isinstance(user, User)
        auth = login_user(database, email="a@x.com", password="pw")
        assert auth["authenticated"] is True
        assert auth["user_details"] == {"id": user.id, "email": "a@x.com"}

    def test_login_failures_are_indistinguishable(self, database):
        register_user(database, name="A", email="a@x.com", password="pw")

        wrong_password = login_user(database, email="a@x.com", password="nope")
        unknown_email = login_user(database, email="b@x.com", password="pw")

        assert wrong_password == unknown_email
        assert wrong_password["authenticated"] is False
