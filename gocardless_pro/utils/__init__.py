"""
utils package
-------------

Helpers built on top of the executor; currently cursor pagination.
"""

from gocardless_pro.utils.pagination import Direction, PageIterator, PageState

__all__ = ["Direction", "PageIterator", "PageState"]
