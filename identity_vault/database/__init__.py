"""
The `database` package is responsible for all interactions with the application's database.
It provides configuration, entity definitions, CRUD operations, and utility functions
that ensure smooth integration between the application and its data layer.

Contents:
    - config:
        Settings and the `Database` storage handle.

    - entities:
        SQLAlchemy entity models representing the database tables and schemas.

    - daos:
        Data Access Objects (DAOs) providing CRUD operations for the entities.

    - core:
        Transactional service functions that connect application routers with the database.

    - helpers:
        The `@transactional` decorator managing sessions and transactions.

    - sync:
        Destructive drop-and-recreate of the schema.
"""
