"""
Persistence Package

The store handle and its error taxonomy.
"""

from .store import (
    Store, Search, Sort, as_identity,
    StoreError, ConstraintError, DeleteCascadeError, RecordNotFound,
)

__all__ = [
    'Store',
    'Search',
    'Sort',
    'as_identity',
    'StoreError',
    'ConstraintError',
    'DeleteCascadeError',
    'RecordNotFound',
]
