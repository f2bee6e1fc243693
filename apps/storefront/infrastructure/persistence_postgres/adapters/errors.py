"""SQLAlchemy 예외 변환."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from apps.storefront.application.common.exceptions import DataMapperError

logger = logging.getLogger(__name__)


@contextmanager
def translate_db_errors(
    operation: str,
    *,
    on_conflict: type[Exception] | None = None,
) -> Iterator[None]:
    """SQLAlchemyError를 DataMapperError로, 제약 조건 위반은 on_conflict로 변환합니다."""
    try:
        yield
    except IntegrityError as e:
        if on_conflict is not None:
            raise on_conflict() from e
        logger.error("Integrity error", extra={"operation": operation, "error": str(e.orig)})
        raise DataMapperError(f"{operation} violated a database constraint") from e
    except SQLAlchemyError as e:
        logger.error("Database error", extra={"operation": operation, "error": str(e)})
        raise DataMapperError() from e
