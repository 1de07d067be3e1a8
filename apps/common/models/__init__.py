"""
Common models module.
"""
from .notification import Notice

__all__ = [
    'Notice',
]
