"""
Top‑level package for the SelectShop API.

The wish‑list backend lives in the ``app`` subpackage and is imported
with fully qualified names such as ``selectshop_api.app.main``.  The
package itself exports nothing.
"""

__all__ = []
