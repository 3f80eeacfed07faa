"""
Version 1 of the API.

Bundles the user, product, folder, admin and search endpoints.
"""
