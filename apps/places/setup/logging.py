"""Logging Configuration.

text 포맷 또는 ECS 호환 JSON 로깅을 설정합니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.places.setup.config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    """로깅 설정."""
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        record.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }
        return record

    logging.setLogRecordFactory(record_factory)

    # SQLAlchemy 로깅 레벨 조정
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
