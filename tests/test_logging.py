import logging

import pytest
from rich.console import Console

from wpfind.logging import ElapsedLogger, configure_logging, format_elapsed, get_logger


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0:00:00"),
        (59.99, "0:00:59"),
        (61, "0:01:01"),
        (3725.9, "1:02:05"),
        (36000, "10:00:00"),
        (-1, "0:00:00"),
    ],
)
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected


def test_elapsed_logger_prefixes_messages(monkeypatch, caplog):
    adapter = ElapsedLogger(logging.getLogger("wpfind.elapsed"), start=0.0)
    monkeypatch.setattr(ElapsedLogger, "elapsed", lambda self: 3725.9)

    with caplog.at_level(logging.INFO, logger="wpfind.elapsed"):
        adapter.info("Recursing into %s", "/srv/")

    assert caplog.messages == ["[1:02:05] Recursing into /srv/"]


@pytest.mark.parametrize(
    "verbose, debug, level",
    [
        (False, False, logging.WARNING),
        (True, False, logging.INFO),
        (False, True, logging.DEBUG),
    ],
)
def test_configure_logging_levels(verbose, debug, level):
    console = Console(file=None, no_color=True)
    logger = configure_logging(console, verbose=verbose, debug=debug)
    assert logger is get_logger()
    assert logger.level == level
    assert len(logger.handlers) == 1


def test_handler_prints_message_without_level_column():
    import io

    buffer = io.StringIO()
    console = Console(file=buffer, width=200, no_color=True)
    logger = configure_logging(console, verbose=True)
    ElapsedLogger(logger).info("Recursing into %s", "/srv/")

    assert buffer.getvalue().strip() == "[0:00:00] Recursing into /srv/"
