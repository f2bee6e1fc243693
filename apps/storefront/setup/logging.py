"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
logger.info(..., extra={...})로 남긴 문맥은 JSON 필드로 출력됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import ecs_logging

if TYPE_CHECKING:
    from apps.storefront.setup.config.settings import Settings

QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "multipart", "uvicorn.access")

# setup_logging을 여러 번 호출해도 팩토리가 중첩되지 않도록 원본을 보관
_BASE_RECORD_FACTORY = logging.getLogRecordFactory()


def setup_logging(settings: "Settings | None" = None) -> None:
    """로깅 설정."""
    if settings is None:
        from apps.storefront.setup.config.settings import get_settings

        settings = get_settings()

    level = "DEBUG" if settings.environment == "local" else settings.log_level

    # ECS JSON 포맷터
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    service = {
        "name": settings.app_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _BASE_RECORD_FACTORY(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)

    # 외부 라이브러리 로그 레벨 조정
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
