"""
services/base.py
-----------------

Shared plumbing for the per-resource services.  A service builds a
descriptor per call and delegates to the executor; keeping the route
knowledge here keeps the executor free of endpoint details.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from gocardless_pro.clients.executor import Executor
from gocardless_pro.core.request import RequestDescriptor
from gocardless_pro.utils.pagination import Direction, PageIterator


class BaseService:
    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def _execute(self, descriptor: RequestDescriptor) -> Any:
        return self._executor.execute(descriptor).resource

    def _paginate(self, descriptor: RequestDescriptor, direction: Direction) -> PageIterator[Any]:
        return PageIterator(self._executor, descriptor, direction=direction)


def body_of(params: Optional[Dict[str, Any]] = None, **fields: Any) -> Dict[str, Any]:
    """Merge explicit fields over a params dict, dropping unset values."""
    body = dict(params or {})
    body.update({k: v for k, v in fields.items() if v is not None})
    return body
