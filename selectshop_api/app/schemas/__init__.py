"""
Pydantic schema definitions for API payloads.

Request and response bodies are declared per domain (users, products,
folders, search) and kept separate from the dataclasses in ``models``
so the wire format can differ from the storage layout.  Field names
are snake_case in Python and camelCase on the wire.
"""
