from typing import Iterator
from fastapi import Request
from sqlmodel import Session


def get_session(request: Request) -> Iterator[Session]:
    """One unit of work per request on the app's open database."""
    with request.app.state.database.session() as session:
        yield session
