"""
HTTP transport and the executor that runs a single logical call.
"""

from gocardless_pro.clients.executor import Executor
from gocardless_pro.clients.http_client import HTTPClient, RawResponse, Transport

__all__ = ["Executor", "HTTPClient", "RawResponse", "Transport"]
