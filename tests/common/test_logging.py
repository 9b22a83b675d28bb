from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from calendrical.common import configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    sqlalchemy_logger = logging.getLogger("sqlalchemy")
    handlers, level = root.handlers[:], root.level
    sqlalchemy_level = sqlalchemy_logger.level
    try:
        yield
    finally:
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
        sqlalchemy_logger.setLevel(sqlalchemy_level)


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_sets_levels() -> None:
    configure_logging(level=logging.DEBUG, force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("sqlalchemy").level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_keeps_quieter_sqlalchemy_level() -> None:
    configure_logging(level=logging.ERROR, force=True)

    assert logging.getLogger("sqlalchemy").level == logging.ERROR
