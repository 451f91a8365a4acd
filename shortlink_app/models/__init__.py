"""
Database models for the link shortener.

Click statistics live next to the links in the same database; the grouped
counts served by the API are computed at query time.
"""

from .link import Link, LinkStatistic

__all__ = ["Link", "LinkStatistic"]
