#!/usr/bin/env python3
"""
Create a login user for the clinic application.

    python -m clinic.provision <username>

The password is prompted for and stored as an unsalted SHA-256 hex digest.
"""
import argparse
import getpass
import logging
import sys

from .config import settings
from .database import Database
from .exceptions import ClinicError
from .application.services.auth_service import AuthService
from .infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository

logger = logging.getLogger(__name__)


def provision(database: Database, username: str, password: str) -> None:
    with database.session() as session:
        AuthService(user_repo=SqlUserRepository(session)).provision_user(username, password)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a clinic login user")
    parser.add_argument("username")
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO), format=settings.LOG_FORMAT)

    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Repeat password: "):
        print("Passwords do not match", file=sys.stderr)
        return 1

    with Database(args.database_url) as database:
        try:
            provision(database, args.username, password)
        except ClinicError as e:
            print(e.message, file=sys.stderr)
            return 1
    print(f"User {args.username} created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
