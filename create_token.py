#!/usr/bin/env python3
"""
Issue a long-lived access token for an existing user.

Useful for scripts and integrations that call the API without going
through ``/api/users/login``.  The token is signed with the configured
``SECRET_KEY``.

Usage:
    python create_token.py --username admin --days 365
"""

import argparse
import sys

from selectshop_api.app.core.db import get_cursor, init_db
from selectshop_api.app.core.security import create_access_token
from selectshop_api.app.repositories import UserRepository


def main() -> int:
    ap = argparse.ArgumentParser(description="Issue a SelectShop API access token.")
    ap.add_argument("--username", required=True, help="Existing username the token is issued to")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days (default: 365)")
    args = ap.parse_args()

    init_db()
    with get_cursor() as cursor:
        user = UserRepository(cursor).find_by_username(args.username)
    if user is None:
        print(f"[!] User not found: {args.username}", file=sys.stderr)
        return 1

    token = create_access_token(
        {"sub": user.username, "role": user.role.value},
        expires_delta=args.days * 24 * 60 * 60,
    )
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
