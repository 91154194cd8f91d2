"""
API Package — FastAPI Routers • Models • JWT Utils • Error Handlers
===================================================================

Mission
-------
This package defines the backend's HTTP interface: FastAPI routing, request
and response contracts, bearer-token auth and the flat error format.

Contents
--------
- fast_api
    Routers with endpoints for:
      • Auth: register, login
      • CRUD (create, list, get, update, delete) over `/users`, `/dids`,
        `/resources`, `/documents` (bearer token required) and
        `/documenttransactions` (open)

- models
    Pydantic data contracts (`<Entity>Create`, `<Entity>Update`,
    `<Entity>Read`, `RegisterDetails`, `LoginCredentials`, `TokenResponse`,
    `ErrorMessage`). They power validation and the OpenAPI schema.

- utils
    JWT helpers:
      • create_access_token(claims) — issues signed JWTs with exp
      • decode_access_token(token) / verify_token(token) — validate JWTs
      • require_user — FastAPI dependency guarding protected routers

- errors
    Exception handlers producing `{"error": <message>}` bodies.

Operational Notes
-----------------
- Tokens are HS256 JWTs carrying `id`, `email` and `exp`; there is no refresh
  flow and no revocation.
- Swagger UI is served at `/api-docs`.
"""
