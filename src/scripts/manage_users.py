"""Operator CLI for forum accounts.

Usage:
    PYTHONPATH=src python -m scripts.manage_users init-db
    PYTHONPATH=src python -m scripts.manage_users register --handle alice --email alice@example.com
    PYTHONPATH=src python -m scripts.manage_users login --handle alice
    PYTHONPATH=src python -m scripts.manage_users show --id 1

Passwords are prompted for, never taken from argv.
"""

import argparse
import getpass
import json
import sys

from adapter.external.bcrypt_hasher import BcryptPasswordHasher, rounds_from_env
from adapter.sql.connection import get_engine, get_session_factory, init_db
from adapter.sql.user_repository import SqlUserRepository
from domain.model.errors import DomainError
from domain.model.user import Credentials, User
from services.account_store import AccountStore
from utils.logging import setup_structured_logging


def build_account_store() -> AccountStore:
    repo = SqlUserRepository(get_session_factory())
    return AccountStore(repo, BcryptPasswordHasher(rounds=rounds_from_env()))


def _public(user: User) -> dict:
    created = user.created_at.isoformat() if user.created_at else None
    return {"id": user.id, "handle": user.handle, "email": user.email, "created_at": created}


def _read_password(prompt: str = "Password: ") -> str:
    return getpass.getpass(prompt)


def cmd_init_db(args, store: AccountStore) -> int:
    init_db(get_engine())
    print("Tables created")
    return 0


def cmd_register(args, store: AccountStore) -> int:
    creds = Credentials(handle=args.handle, email=args.email, password=_read_password())
    user = store.register(creds)
    print(json.dumps(_public(user)))
    return 0


def cmd_login(args, store: AccountStore) -> int:
    creds = Credentials(handle=args.handle, password=_read_password())
    user = store.login(creds)
    print(json.dumps(_public(user)))
    return 0


def cmd_show(args, store: AccountStore) -> int:
    if args.id is not None:
        user = store.find_by_id(args.id)
    else:
        user = store.find_by_handle(args.handle)
    print(json.dumps(_public(user)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage forum user accounts")
    parser.add_argument('--log-level', default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('init-db', help="Create the users table")
    p.set_defaults(func=cmd_init_db)

    p = sub.add_parser('register', help="Register a new user")
    p.add_argument('--handle', required=True)
    p.add_argument('--email', required=True)
    p.set_defaults(func=cmd_register)

    p = sub.add_parser('login', help="Check a handle/password pair")
    p.add_argument('--handle', required=True)
    p.set_defaults(func=cmd_login)

    p = sub.add_parser('show', help="Look up a user")
    group = p.add_mutually_exclusive_group(required=True)
    group.add_argument('--handle')
    group.add_argument('--id', type=int)
    p.set_defaults(func=cmd_show)

    return parser


def main(argv: list[str] | None = None, store: AccountStore | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_structured_logging(args.log_level)
    store = store or build_account_store()
    try:
        return args.func(args, store)
    except DomainError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
