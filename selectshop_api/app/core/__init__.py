"""
Cross‑cutting infrastructure: settings, logging, the SQLite layer,
security helpers and the domain error types.
"""
