import logging

import pytest
import structlog

from searxng_search.logging import configure_logging, log_context


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_configure_logging_installs_structlog_formatter(restore_root_logger) -> None:
    configure_logging("debug", json_output=True)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info(restore_root_logger) -> None:
    configure_logging("chatty", json_output=False)
    assert restore_root_logger.level == logging.INFO


def test_log_context_is_scoped() -> None:
    with log_context(tool_call_id="call-1"):
        assert structlog.contextvars.get_contextvars()["tool_call_id"] == "call-1"
    assert "tool_call_id" not in structlog.contextvars.get_contextvars()
