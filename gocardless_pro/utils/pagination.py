"""
utils/pagination.py
--------------------

Lazy iteration over cursor-paginated list endpoints.

List responses carry ``meta.cursors.before`` / ``meta.cursors.after``.
:class:`PageIterator` requests one page at a time, yields its resources
and follows the cursor in the chosen direction.  Iteration stops when a
page comes back without a next cursor; a short page does not mean the
collection is exhausted on this API, so page size is never used as a
signal.

An iterator is single-use and must not be advanced from several threads
at once.  To resume later, or to paginate concurrently, build a new
iterator seeded with :attr:`PageIterator.cursor`::

    pages = client.customers.list(limit=50)
    for customer in pages:
        ...
    resume_from = pages.cursor
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Generic, Iterator, List, Optional, TypeVar

from gocardless_pro.clients.executor import Executor
from gocardless_pro.core.envelope import ApiResponse
from gocardless_pro.core.request import RequestDescriptor, ResponseShape
from gocardless_pro.logging_config import log_event

T = TypeVar("T")


class Direction(str, Enum):
    FORWARD = "after"
    BACKWARD = "before"


class PageState(str, Enum):
    START = "start"
    HAS_PAGE = "has_page"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class PageIterator(Generic[T]):
    """Iterator over every resource of a list endpoint, page by page.

    :param executor: executes each page request
    :param descriptor: the base LIST descriptor (filters, ``limit``)
    :param direction: follow ``after`` (forward) or ``before`` (backward)
        cursors; fixed for the iterator's lifetime
    :param cursor: position to start from; defaults to the matching cursor
        already present in ``descriptor.query_params``, if any
    """

    def __init__(
        self,
        executor: Executor,
        descriptor: RequestDescriptor,
        *,
        direction: Direction = Direction.FORWARD,
        cursor: Optional[str] = None,
    ) -> None:
        if descriptor.response_shape is not ResponseShape.LIST:
            raise ValueError("PageIterator requires a LIST descriptor")
        self._executor = executor
        self.direction = Direction(direction)
        base_query = {k: v for k, v in descriptor.query_params.items()
                      if k not in (Direction.FORWARD.value, Direction.BACKWARD.value)}
        self._descriptor = descriptor.model_copy(update={"query_params": base_query})
        self._cursor = cursor or descriptor.query_params.get(self.direction.value)
        self._buffer: List[T] = []
        self._position = 0
        self._next_cursor: Optional[str] = None
        self.state = PageState.START
        self.pages_fetched = 0

    @property
    def cursor(self) -> Optional[str]:
        """Cursor from which a fresh iterator resumes after the last fetched page.

        ``None`` before the first page when no starting cursor was given, and
        once the collection is exhausted.
        """
        if self.state is PageState.START or self.state is PageState.FAILED:
            return self._cursor
        return self._next_cursor

    def __iter__(self) -> "PageIterator[T]":
        return self

    def __next__(self) -> T:
        while self._position >= len(self._buffer):
            if not self._advance():
                raise StopIteration
        item = self._buffer[self._position]
        self._position += 1
        return item

    def pages(self) -> Iterator[ApiResponse[T]]:
        """Yield whole pages (with status, headers and meta) instead of items."""
        while self._advance():
            self._position = len(self._buffer)
            yield self._last_page

    def _advance(self) -> bool:
        """Fetch the next page; return ``False`` when there is none."""
        if self.state in (PageState.EXHAUSTED, PageState.FAILED):
            return False
        if self.state is PageState.HAS_PAGE:
            if not self._next_cursor:
                self.state = PageState.EXHAUSTED
                return False
            self._cursor = self._next_cursor

        descriptor = self._descriptor
        if self._cursor:
            descriptor = descriptor.with_query(**{self.direction.value: self._cursor})
        try:
            page = self._executor.execute(descriptor)
        except Exception:
            self.state = PageState.FAILED
            raise

        self.pages_fetched += 1
        self._last_page: ApiResponse[T] = page
        self._buffer = page.items
        self._position = 0
        meta = page.meta
        self._next_cursor = getattr(meta, self.direction.value) if meta is not None else None
        self.state = PageState.HAS_PAGE
        log_event(logging.DEBUG, "page_fetched", path=descriptor.path_template, page=self.pages_fetched,
                  items=len(self._buffer), next_cursor=self._next_cursor)
        return True
