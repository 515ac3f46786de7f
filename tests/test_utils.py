import logging

import pytest

from kumo.utils import Peekable, get_logger


def test_peek_then_next() -> None:
    items = Peekable([1, 2])
    assert items.peek() == 1
    assert next(items) == 1
    assert next(items) == 2
    assert not items


def test_peek_default_when_exhausted() -> None:
    items = Peekable([])
    assert items.peek("end") == "end"
    with pytest.raises(StopIteration):
        items.peek()


def test_prepend_keeps_order() -> None:
    items = Peekable([3])
    items.prepend(1, 2)
    assert list(items) == [1, 2, 3]


def test_get_logger() -> None:
    logger = get_logger("kumo.tokenize")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "kumo.tokenize"


def test_peek_none_default_is_returned() -> None:
    items = Peekable([])
    assert items.peek(None) is None
    assert not items


def test_bool_sees_prepended_items() -> None:
    items = Peekable([])
    items.prepend(0)
    assert items
    assert items.peek() == 0
    assert next(items) == 0
    assert not items
