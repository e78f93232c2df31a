#!/usr/bin/env python3
"""Create a user account from the command line.

Usage:
    DATABASE_URL=sqlite:///./app.db PORT=8000 JWT_SECRET=... \
        python scripts/create_user.py "Jane Doe" jane@example.com
"""

import argparse
import getpass
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.database import SessionLocal, init_db
from src.services.account_service import AccountService
from src.services.auth import get_token_issuer
from src.services.exceptions import AccountError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a user account")
    parser.add_argument("name", help="Display name for the user")
    parser.add_argument("email", help="Unique email address for login")
    parser.add_argument(
        "--token",
        action="store_true",
        help="Also print an access token for the new user",
    )
    return parser.parse_args(argv)


def prompt_for_password() -> str:
    for _ in range(3):
        password = getpass.getpass("Password: ")
        confirm = getpass.getpass("Confirm password: ")
        if password != confirm:
            print("Passwords do not match. Try again.", file=sys.stderr)
            continue
        return password
    raise SystemExit("Failed to set password after three attempts.")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    password = prompt_for_password()

    init_db()
    session = SessionLocal()
    token_issuer = get_token_issuer()
    try:
        service = AccountService(session, token_issuer)
        user = service.create_user({"name": args.name, "email": args.email, "password": password})
    except AccountError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        session.close()

    print(f"Created user {user.id}: {user.name} <{user.email}>")
    if args.token:
        print(token_issuer.issue(user.id))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
