import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from ....exceptions import ClinicError, StorageError

logger = logging.getLogger(__name__)


def constraint_message(exc: IntegrityError) -> str:
    return str(exc.orig if exc.orig is not None else exc).lower()


@contextmanager
def storage_errors(
    session: Session,
    action: str,
    on_integrity: Optional[Callable[[IntegrityError], Optional[ClinicError]]] = None,
) -> Iterator[None]:
    """Roll back and re-raise database failures as clinic errors.

    ``on_integrity`` may map a constraint violation to a specific error;
    anything it does not claim becomes a StorageError.
    """
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        mapped = on_integrity(e) if on_integrity else None
        if mapped is not None:
            raise mapped from e
        logger.error(f"Constraint violation while {action}: {e.orig}")
        raise StorageError(f"Error {action}: {e.orig}") from e
    except SQLAlchemyError as e:
        session.rollback()
        # DBAPI errors carry the driver message; the wrapper adds the SQL text
        reason = getattr(e, "orig", None) or e
        logger.error(f"Database error while {action}: {reason}")
        raise StorageError(f"Error {action}: {reason}") from e
