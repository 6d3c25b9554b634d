"""
Core helpers package for the GoCardless Pro client.

This package contains the transport-independent pieces of a call:
request descriptors, path templates, retry and idempotency rules, and
the parsers for success and error envelopes.  Keeping them apart from
the HTTP client makes each rule easy to test on its own.
"""

__all__ = []
