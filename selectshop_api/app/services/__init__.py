"""
Service layer.

Each service encapsulates the business logic of one domain (users,
products, folders, search).  Services open the database scope they
need, drive the repositories and raise the typed errors from
``core.exceptions``; the API handlers stay free of SQL.
"""
