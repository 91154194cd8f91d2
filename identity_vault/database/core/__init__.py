"""
The `core` package connects the API routers with the DAOs through
transactional service functions (see `funcs`).
"""
