"""
The `config` package provides two core building blocks for establishing and managing database connections.

Contents:
    - config: Configuration layer - strongly typed app settings loaded from environment variables (with .env support), exposed through `get_settings()`
    - connection_engine: Database layer - the `Database` storage handle (Engine + session factory) built once at startup, the shared MetaData and the declarative base for ORM models
"""
