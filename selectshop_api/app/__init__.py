"""
Application package initializer.

The code is split into layers: ``api`` holds the versioned FastAPI
routers, ``services`` the domain logic, ``repositories`` the SQL
accessors and ``models`` the plain entity classes they exchange.
``core`` contains configuration, logging, database and security
helpers shared by all layers.
"""

from .main import app  # noqa: F401
