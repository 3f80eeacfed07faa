"""Shared typing for repositories."""

import sqlite3
from typing import Union

# Anything with ``execute``: the cursor from ``get_cursor`` or the
# connection yielded by ``transaction``.
Executor = Union[sqlite3.Connection, sqlite3.Cursor]
