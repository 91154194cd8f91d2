"""Identity Vault: REST API over users, DIDs, resources, documents and document transactions."""

__version__ = "1.0.0"
