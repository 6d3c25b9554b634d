"""
core/idempotency.py
--------------------

Idempotency keys for create requests.

The API deduplicates POSTs that carry the same ``Idempotency-Key``
header.  A key is generated once per logical call and sent on every
attempt of that call, which is what makes retrying a create safe.
"""

from __future__ import annotations

import uuid
from typing import Callable, Optional

from gocardless_pro.core.request import RequestDescriptor

IDEMPOTENCY_HEADER = "Idempotency-Key"


class IdempotencyManager:
    """Hands out idempotency keys for eligible POST descriptors.

    A caller-supplied ``idempotency_key`` on the descriptor is used as is.
    Reusing the same key for two genuinely different calls makes the
    server treat the second as a duplicate of the first; this layer has
    no way to detect that, so callers passing their own keys must keep
    them unique per operation.
    """

    def __init__(self, key_factory: Callable[[], str] = lambda: str(uuid.uuid4())) -> None:
        self._key_factory = key_factory

    def token_for(self, descriptor: RequestDescriptor) -> Optional[str]:
        """Return the key for one logical call, or ``None`` if none applies."""
        if descriptor.method != "POST":
            return None
        if descriptor.idempotency_key:
            return descriptor.idempotency_key
        if descriptor.idempotent:
            return self._key_factory()
        return None
