"""
Marketing views package.

Re-exports all views for urls.py.
"""

from .landing import landing_page, privacy_page

__all__ = [
    "landing_page",
    "privacy_page",
]
