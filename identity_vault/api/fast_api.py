"""
FastAPI Routers — Auth • Users • DIDs • Resources • Documents • Transactions
===========================================================================

Purpose
-------
Defines the HTTP API for:
- Authentication: register, login (JWT bearer tokens)
- CRUD over the five entities, one router per entity built by
  `build_crud_router`

Key Notes
---------
- Input validation via Pydantic models in `identity_vault.api.models`.
- `/users`, `/dids`, `/resources` and `/documents` require
  `Authorization: Bearer <token>`; `/documenttransactions` does not.
- Every handler performs one transactional service call against the
  `Database` stored on `app.state` and maps the outcome to a status code:

  ======== ============ ============================== ==========================
  Verb     Success      Miss                            Storage failure
  ======== ============ ============================== ==========================
  POST     201 + row    -                               400
  GET /    200 + list   -                               500
  GET /id  200 + row    404                             500
  PUT /id  200 + row    404                             400
  DELETE   204          404                             500
  ======== ============ ============================== ==========================
"""

import logging
from typing import Any, List, NamedTuple, Type

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from identity_vault.api.models import (
    DIDCreate, DIDRead, DIDUpdate,
    DocumentCreate, DocumentRead, DocumentUpdate,
    DocumentTransactionCreate, DocumentTransactionRead, DocumentTransactionUpdate,
    ErrorMessage, LoginCredentials, RegisterDetails,
    ResourceCreate, ResourceRead, ResourceUpdate,
    TokenResponse,
    UserCreate, UserRead, UserUpdate,
)
from identity_vault.api.utils import create_access_token, require_user
from identity_vault.database.config.connection_engine import Database
from identity_vault.database.core.funcs import (
    create_record, delete_record, get_record, list_records, login_user, register_user, update_record,
)
from identity_vault.database.daos.base_dao import BaseDao
from identity_vault.database.daos.did_dao import DIDDao
from identity_vault.database.daos.document_dao import DocumentDao
from identity_vault.database.daos.document_transaction_dao import DocumentTransactionDao
from identity_vault.database.daos.resource_dao import ResourceDao
from identity_vault.database.daos.user_dao import UserDao

logger = logging.getLogger(__name__)


def get_database(request: Request) -> Database:
    """Dependency returning the storage handle built at startup."""
    return request.app.state.database


def storage_error_message(exc: SQLAlchemyError) -> str:
    """Driver message of a failed statement, without the SQL echo."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _error(description: str) -> dict:
    return {"model": ErrorMessage, "description": description}


AUTH_RESPONSES = {
    401: _error("Access token is missing"),
    403: _error("Invalid or expired token"),
}


class EntityRoute(NamedTuple):
    """Static description of one entity's CRUD router."""
    prefix: str
    tag: str
    label: str
    noun: str
    dao: BaseDao
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    read_model: Type[BaseModel]
    id_type: type
    protected: bool


def build_crud_router(entity: EntityRoute) -> APIRouter:
    """
    Build the create/list/get/update/delete router of one entity.

    Parameters
    ----------
    entity : EntityRoute
        Paths, schemas, DAO and auth requirement of the entity.

    Returns
    -------
    APIRouter
        Router mounted at `entity.prefix`.
    """
    dependencies = [Depends(require_user)] if entity.protected else []
    auth_responses = AUTH_RESPONSES if entity.protected else {}
    router = APIRouter(prefix=entity.prefix, tags=[entity.tag], dependencies=dependencies)

    dao = entity.dao
    noun = entity.noun
    not_found = f"{entity.label} not found"
    CreateModel = entity.create_model
    UpdateModel = entity.update_model
    ReadModel = entity.read_model
    IdType = entity.id_type

    @router.post(
        "",
        status_code=201,
        response_model=ReadModel,
        summary=f"Create a new {noun}",
        response_description=f"The {noun} was successfully created",
        responses={400: _error("Bad request"), **auth_responses},
    )
    def create(payload: CreateModel, database: Database = Depends(get_database)):
        try:
            return create_record(database, dao, payload.to_row())
        except SQLAlchemyError as e:
            logger.warning("Create %s failed: %s", noun, e)
            raise HTTPException(status_code=400, detail=storage_error_message(e))

    @router.get(
        "",
        response_model=List[ReadModel],
        summary=f"Returns the list of all the {noun}s",
        response_description=f"The list of the {noun}s",
        responses={500: _error("Some server error"), **auth_responses},
    )
    def list_all(database: Database = Depends(get_database)):
        try:
            return list_records(database, dao)
        except SQLAlchemyError as e:
            logger.exception("List %ss failed", noun)
            raise HTTPException(status_code=500, detail=storage_error_message(e))

    @router.get(
        "/{id}",
        response_model=ReadModel,
        summary=f"Get a {noun} by id",
        response_description=f"The {noun} description by id",
        responses={404: _error(not_found), 500: _error("Some server error"), **auth_responses},
    )
    def get_one(id: IdType, database: Database = Depends(get_database)):
        try:
            record = get_record(database, dao, id)
        except SQLAlchemyError as e:
            logger.exception("Get %s %s failed", noun, id)
            raise HTTPException(status_code=500, detail=storage_error_message(e))
        if record is None:
            raise HTTPException(status_code=404, detail=not_found)
        return record

    @router.put(
        "/{id}",
        response_model=ReadModel,
        summary=f"Update a {noun} by id",
        response_description=f"The {noun} was updated",
        responses={400: _error("Bad request"), 404: _error(not_found), **auth_responses},
    )
    def update(id: IdType, payload: UpdateModel, database: Database = Depends(get_database)):
        try:
            record = update_record(database, dao, id, payload.to_row())
        except SQLAlchemyError as e:
            logger.warning("Update %s %s failed: %s", noun, id, e)
            raise HTTPException(status_code=400, detail=storage_error_message(e))
        if record is None:
            raise HTTPException(status_code=404, detail=not_found)
        return record

    @router.delete(
        "/{id}",
        status_code=204,
        response_class=Response,
        summary=f"Delete a {noun} by id",
        response_description=f"The {noun} was deleted",
        responses={404: _error(not_found), 500: _error("Some server error"), **auth_responses},
    )
    def delete(id: IdType, database: Database = Depends(get_database)):
        try:
            deleted = delete_record(database, dao, id)
        except SQLAlchemyError as e:
            logger.exception("Delete %s %s failed", noun, id)
            raise HTTPException(status_code=500, detail=storage_error_message(e))
        if not deleted:
            raise HTTPException(status_code=404, detail=not_found)
        return Response(status_code=204)

    return router


ENTITY_ROUTES = (
    EntityRoute(
        prefix="/resources", tag="Resources", label="Resource", noun="resource", dao=ResourceDao(),
        create_model=ResourceCreate, update_model=ResourceUpdate, read_model=ResourceRead,
        id_type=str, protected=True,
    ),
    EntityRoute(
        prefix="/users", tag="Users", label="User", noun="user", dao=UserDao(),
        create_model=UserCreate, update_model=UserUpdate, read_model=UserRead,
        id_type=int, protected=True,
    ),
    EntityRoute(
        prefix="/dids", tag="DIDs", label="DID", noun="DID", dao=DIDDao(),
        create_model=DIDCreate, update_model=DIDUpdate, read_model=DIDRead,
        id_type=str, protected=True,
    ),
    EntityRoute(
        prefix="/documents", tag="Documents", label="Document", noun="document", dao=DocumentDao(),
        create_model=DocumentCreate, update_model=DocumentUpdate, read_model=DocumentRead,
        id_type=int, protected=True,
    ),
    # Unauthenticated, as the transaction log has always been.
    EntityRoute(
        prefix="/documenttransactions", tag="DocumentTransactions", label="DocumentTransaction",
        noun="document transaction", dao=DocumentTransactionDao(),
        create_model=DocumentTransactionCreate, update_model=DocumentTransactionUpdate,
        read_model=DocumentTransactionRead, id_type=int, protected=False,
    ),
)
"""Every entity exposed by the API, declared statically."""


auth_router = APIRouter(tags=["Auth"])
"""Registration and login routes."""


@auth_router.post(
    "/register",
    status_code=201,
    response_model=UserRead,
    summary="Register a new user",
    responses={400: _error("Bad request")},
)
def register(data: RegisterDetails, database: Database = Depends(get_database)) -> Any:
    """Create a user with a bcrypt-hashed password and return the stored row."""
    try:
        return register_user(database, name=data.name, email=data.email, password=data.password)
    except SQLAlchemyError as e:
        logger.warning("Registration failed for %s: %s", data.email, e)
        raise HTTPException(status_code=400, detail=storage_error_message(e))


@auth_router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in and obtain a bearer token",
    responses={400: _error("Invalid email or password.")},
)
def login(request: Request, data: LoginCredentials, database: Database = Depends(get_database)) -> Any:
    """Authenticate by email/password and issue a one-hour access token.

    Unknown email and wrong password answer the same 400 body.
    """
    try:
        auth = login_user(database, email=data.email, password=data.password)
    except SQLAlchemyError as e:
        logger.warning("Login lookup failed: %s", e)
        raise HTTPException(status_code=400, detail=storage_error_message(e))
    if not auth["authenticated"]:
        raise HTTPException(status_code=400, detail=auth["detail"])
    claims = {"id": auth["user_details"]["id"], "email": auth["user_details"]["email"]}
    token = create_access_token(claims, settings=request.app.state.settings)
    return {"token": token}


router = APIRouter()
"""Creates the FastAPI router in which we define its routes"""
router.include_router(auth_router)
for entity_route in ENTITY_ROUTES:
    router.include_router(build_crud_router(entity_route))
