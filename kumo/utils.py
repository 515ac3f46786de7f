import logging
from collections import deque
from typing import Any, Generic, Iterable, Iterator, Self, TypeVar


T = TypeVar("T")
_MISSING = object()


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a kumo module.

    Handlers are left to the application; the command line configures them
    in ``kumo.main``.
    """
    return logging.getLogger(name)


class Peekable(Generic[T], Iterator[T]):
    """Iterator that can look ahead and take items back.

    Items handed to ``prepend`` are returned before anything else, in the
    order given.
    """

    def __init__(self, iterable: Iterable[T]):
        self._source = iter(iterable)
        self._pending: deque[T] = deque()

    def __iter__(self) -> Self:
        return self

    def __bool__(self) -> bool:
        try:
            self.peek()
        except StopIteration:
            return False
        return True

    def peek(self, default: Any = _MISSING) -> Any:
        """Return the next item without consuming it.

        When the iterator is exhausted, ``default`` is returned if one was
        given, otherwise ``StopIteration`` is raised.
        """
        if not self._pending:
            try:
                self._pending.append(next(self._source))
            except StopIteration:
                if default is _MISSING:
                    raise
                return default
        return self._pending[0]

    def prepend(self, *items: T) -> None:
        self._pending.extendleft(reversed(items))

    def __next__(self) -> T:
        if self._pending:
            return self._pending.popleft()
        return next(self._source)
