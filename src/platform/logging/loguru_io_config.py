from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import inspect
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Use test log directory if in test environment
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)


# Constants and shared variables for LoguruIO
SENSITIVE_KEYWORDS = {
    'password',
    'hashed_password',
    'secret',
    'token',
}
MASK = '********'
TRUNCATE_LIMIT = 1000

chain_start_time_var: ContextVar[float] = ContextVar('first_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# DEBUG records from these stdlib loggers are dropped
QUIET_DEBUG_LOGGERS = ('aiosqlite', 'sqlalchemy', 'asyncio')

io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{name}}:{{line}}</> <y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        f'<lk>{{elapsed}} {{extra[{ExtraField.CHAIN_START_TIME}]}}</>',
    )
)

loguru_logger.remove()
custom_logger: 'LoguruLogger' = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'
custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level)

if settings.DEBUG:
    log_prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    custom_logger.add(
        f'{LOG_DIR}/{log_prefix}{datetime.now(timezone.utc):%Y-%m-%d_%H}.log',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        level=min_log_level,
    )


class InterceptHandler(logging.Handler):
    """Forward stdlib records (alembic, sqlalchemy, granian) to the storefront sinks."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(QUIET_DEBUG_LOGGERS):
            return

        level: str | int
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
