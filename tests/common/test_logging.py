from __future__ import annotations

import logging

from stagetyper.common import configure_logging


def test_httpx_request_logs_stay_quiet_at_debug() -> None:
    httpx_logger = logging.getLogger("httpx")
    previous = httpx_logger.level
    try:
        configure_logging(level=logging.DEBUG)
        assert httpx_logger.level == logging.WARNING

        configure_logging(level=logging.ERROR)
        assert httpx_logger.level == logging.ERROR
    finally:
        httpx_logger.setLevel(previous)
