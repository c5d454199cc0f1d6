"""
Database Base Module

Creates the SQLAlchemy database instance that all models inherit from,
plus the identity mixin shared by every record type.
This is separate to avoid circular imports.
"""

import sqlite3
import uuid

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Create the SQLAlchemy instance
# This will be initialized with the Flask app in app.py
db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable SQLite foreign key enforcement so ON DELETE rules apply."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class IdentityMixin:
    """UUID primary key, assigned when the object is constructed."""
    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)

    def __init__(self, **kwargs):
        kwargs.setdefault('id', uuid.uuid4())
        super().__init__(**kwargs)

    def __repr__(self):
        label = getattr(self, 'name', None) or getattr(self, 'quantity', '')
        return f'<{type(self).__name__} {self.id} {label!r}>'
