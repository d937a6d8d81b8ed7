# contentgen/core/logger.py
"""
Logging setup shared by every module.

Loggers are created lazily through `get_logger(name)`. Console output is
always on; a file handler is added when LOG_DIR is set, and LOG_JSON
switches both to one JSON object per line.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from core.config import settings

LOG_FILE_NAME = "contentgen.log"

# Attributes passed through `extra={...}` that end up in the output
EXTRA_FIELDS = (
    'topic', 'content_type', 'tone', 'model_name', 'provider',
    'tokens', 'cost', 'duration', 'error_code',
)


def _extras(record: logging.LogRecord) -> dict:
    return {key: getattr(record, key) for key in EXTRA_FIELDS if hasattr(record, key)}


class StructuredFormatter(logging.Formatter):
    """`[2026-01-09 10:30:45] [INFO    ] [content.generator] message | key=value`"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        source = '.'.join(record.name.split('.')[-2:])

        line = f"[{timestamp}] [{record.levelname:8}] [{source}] {record.getMessage()}"
        extras = _extras(record)
        if extras:
            line += ' | ' + ' | '.join(f"{k}={v}" for k, v in extras.items())

        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    use_json: bool = False
) -> logging.Logger:
    """Replace the handlers of logger `name` with console (and optional file) output."""
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.propagate = False

    formatter = JSONFormatter() if use_json else StructuredFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return logger `name`, configuring it from settings on first use."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_file = str(Path(settings.LOG_DIR) / LOG_FILE_NAME) if settings.LOG_DIR else None
    return setup_logger(name, level=settings.LOG_LEVEL, log_file=log_file, use_json=settings.LOG_JSON)


def log_token_usage(model: str, input_tokens: int, output_tokens: int, cost: float = 0.0) -> None:
    """One INFO line per model call on the `usage.tokens` logger."""
    total = input_tokens + output_tokens
    get_logger("usage.tokens").info(
        f"Token usage: {total:,} total ({input_tokens:,} input + {output_tokens:,} output)",
        extra={'model_name': model, 'tokens': total, 'cost': f"${cost:.6f}"}
    )
