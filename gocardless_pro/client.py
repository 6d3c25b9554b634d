"""
client.py
----------

Entry point of the library.

:class:`Client` wires the shared pieces together once (settings, HTTP
transport, retry policy, executor) and exposes the per-resource
services.  The transport keeps a connection pool, so create one client
per process and close it on shutdown, or use it as a context manager::

    with Client(access_token="...", environment="sandbox") as client:
        mandate = client.mandates.get("MD123")
        for account in client.customer_bank_accounts.list(customer="CU123"):
            ...
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

import httpx

from gocardless_pro.clients.executor import Executor
from gocardless_pro.clients.http_client import HTTPClient, Transport
from gocardless_pro.core.auth import bearer_auth, build_default_headers, get_base_url
from gocardless_pro.core.config import Settings, get_settings
from gocardless_pro.core.envelope import ApiResponse
from gocardless_pro.core.request import RequestDescriptor
from gocardless_pro.core.retry import RetryPolicy
from gocardless_pro.logging_config import log_event
from gocardless_pro.services import (
    BankDetailsLookupService,
    CreditorService,
    CustomerBankAccountService,
    CustomerService,
    MandateService,
    SubscriptionService,
)
from gocardless_pro.utils.pagination import Direction, PageIterator


class Client:
    """GoCardless Pro API client.

    Explicit arguments take precedence over :class:`Settings`, which in
    turn reads ``GOCARDLESS_*`` environment variables.

    :param access_token: bearer token; falls back to ``settings.access_token``
    :param environment: ``live`` or ``sandbox``
    :param base_url: explicit API root, overriding ``environment``
    :param settings: settings object; defaults to :func:`get_settings`
    :param transport: custom transport (anything with ``send``/``close``)
    :param http_transport: ``httpx`` transport for the default HTTP client,
        e.g. ``httpx.MockTransport`` in tests
    :param retry_policy: retry policy; defaults to one built from settings
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None,
        http_transport: Optional[httpx.BaseTransport] = None,
        retry_policy: Optional[RetryPolicy] = None,
        **executor_options: Any,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = get_base_url(environment or self.settings.environment, base_url or self.settings.base_url)
        self.transport: Transport = transport or HTTPClient(self.settings.http_timeout, transport=http_transport)
        self.executor = Executor(
            self.transport,
            self.base_url,
            bearer_auth(access_token or self.settings.access_token),
            retry_policy=retry_policy or RetryPolicy.from_settings(self.settings),
            default_headers=build_default_headers(self.settings),
            **executor_options,
        )

        # Sub-clients for each resource
        self.bank_details_lookups = BankDetailsLookupService(self.executor)
        self.creditors = CreditorService(self.executor)
        self.customer_bank_accounts = CustomerBankAccountService(self.executor)
        self.customers = CustomerService(self.executor)
        self.mandates = MandateService(self.executor)
        self.subscriptions = SubscriptionService(self.executor)
        log_event(logging.DEBUG, "client_created", base_url=self.base_url,
                  max_attempts=self.executor.retry_policy.max_attempts)

    def execute(self, descriptor: RequestDescriptor, *,
                cancel_event: Optional[threading.Event] = None) -> ApiResponse[Any]:
        """Run any descriptor and return the full response (status, headers, resource)."""
        return self.executor.execute(descriptor, cancel_event=cancel_event)

    def paginate(self, descriptor: RequestDescriptor, direction: Direction = Direction.FORWARD,
                 cursor: Optional[str] = None) -> PageIterator[Any]:
        """Iterate lazily over every resource of a LIST descriptor."""
        return PageIterator(self.executor, descriptor, direction=direction, cursor=cursor)

    def close(self) -> None:
        """Close the transport and release pooled connections."""
        self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
