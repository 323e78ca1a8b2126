"""Atomic Unit - one transaction around a read-validate-write sequence.

Invariants:
    - Normal exit commits; ANY exception (domain error, SQLAlchemy error,
      asyncio.CancelledError) rolls back before propagating
    - SQLAlchemy errors leave as DatabaseError (generic 500 at the boundary)
    - A failed rollback is logged; the original exception still propagates
    - No retries: a failed unit must be resubmitted by the caller
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError

from coinshop.core.errors import CoinShopError, ErrorKind
from coinshop.core.repository_protocols import Transactional
from coinshop.infrastructure.database import map_sqlalchemy_error

logger = logging.getLogger(__name__)


async def _rollback(tx: Transactional, operation: str) -> None:
    try:
        await tx.rollback()
    except Exception:
        logger.error(f"Rollback failed for {operation}", exc_info=True)


@asynccontextmanager
async def atomic(tx: Transactional, operation: str) -> AsyncIterator[None]:
    """Run the body as a single unit: commit on success, roll back on any error."""
    try:
        yield
    except CoinShopError as e:
        await _rollback(tx, operation)
        if e.kind is ErrorKind.INTERNAL:
            logger.error(
                f"{operation} rolled back: {e.message}",
                extra={"error_code": e.code},
            )
        else:
            logger.debug(
                f"{operation} rolled back: {e.message}",
                extra={"error_code": e.code},
            )
        raise
    except SQLAlchemyError as e:
        await _rollback(tx, operation)
        logger.error(f"{operation} rolled back on DB error: {e}")
        raise map_sqlalchemy_error(e) from e
    except BaseException as e:
        await _rollback(tx, operation)
        logger.warning(f"{operation} rolled back ({type(e).__name__})")
        raise
    else:
        try:
            await tx.commit()
        except SQLAlchemyError as e:
            await _rollback(tx, operation)
            logger.error(f"{operation} commit failed: {e}")
            raise map_sqlalchemy_error(e) from e
