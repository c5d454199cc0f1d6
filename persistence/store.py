"""
Persistence Store

Wraps a SQLAlchemy session with the operations the services need:
insert, update, delete with relationship-aware propagation, point-in-time
queries and an atomic save. Nothing is durable until save() commits.
"""

import logging
import uuid
from collections import namedtuple

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models import RecipeIngredient
from models.rules import CASCADE, NULLIFY, DELETE_RULES, SEARCH_FIELDS, SORT_FIELDS, FOLDED_COLUMNS
from utils.sanitizer import normalize_name

logger = logging.getLogger(__name__)

# Substring filter: matches when any of `fields` contains `text` (folded)
Search = namedtuple('Search', ['text', 'fields'])

Sort = namedtuple('Sort', ['field', 'descending'], defaults=(False,))


class StoreError(Exception):
    """Raised when the underlying storage fails."""
    pass


class ConstraintError(StoreError):
    """Raised on identity collisions and integrity violations."""
    pass


class DeleteCascadeError(StoreError):
    """Raised when a delete cannot propagate to related records."""
    pass


class RecordNotFound(LookupError):
    """Raised when an id does not resolve to a record."""

    def __init__(self, model, record_id):
        self.model = model
        self.record_id = record_id
        super().__init__(f'{model.__name__} {record_id} not found')


def as_identity(value):
    """Coerce a UUID or its string form into a UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise ValueError(f'Invalid id: {value!r}') from None


def _cascade(session, record, attr):
    for child in list(getattr(record, attr)):
        session.delete(child)


def _nullify(session, record, attr):
    back_ref = inspect(type(record)).relationships[attr].back_populates
    for child in list(getattr(record, attr)):
        setattr(child, back_ref, None)


PROPAGATORS = {
    CASCADE: _cascade,
    NULLIFY: _nullify,
}


class Store:
    """
    Storage handle passed to every service function.

    The session is usually Flask-SQLAlchemy's scoped ``db.session``.
    """

    def __init__(self, session):
        self.session = session

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, model, record_id):
        record_id = as_identity(record_id)
        try:
            return self.session.get(model, record_id)
        except SQLAlchemyError as e:
            self._abort(f'Could not load {model.__name__} {record_id}', e)
            raise StoreError(f'Could not load {model.__name__} {record_id}') from e

    def get_or_raise(self, model, record_id):
        record = self.get(model, record_id)
        if record is None:
            raise RecordNotFound(model, record_id)
        return record

    def count(self, model):
        try:
            return self.session.query(model).count()
        except SQLAlchemyError as e:
            self._abort(f'Could not count {model.__name__}', e)
            raise StoreError(f'Could not count {model.__name__}') from e

    def query(self, model, where=None, search=None, sort=None):
        """
        Fetch records of one type.

        Args:
            model: Model class to query
            where: Dict of field -> value equality filters
            search: Search(text, fields) substring filter, case and accent
                insensitive; empty text matches everything
            sort: Sort(field, descending)

        Returns:
            list of records, empty when nothing matches

        Raises:
            ValueError: Unknown filter, search or sort field
            StoreError: The query failed
        """
        columns = inspect(model).columns.keys()
        query = self.session.query(model)

        if where:
            unknown = set(where) - set(columns)
            if unknown:
                raise ValueError(f'Unknown {model.__name__} field(s): {", ".join(sorted(unknown))}')
            query = query.filter_by(**where)

        if sort is not None:
            if sort.field not in SORT_FIELDS[model]:
                raise ValueError(f'Cannot sort {model.__name__} by {sort.field!r}')
            column = getattr(model, FOLDED_COLUMNS.get(sort.field, sort.field))
            query = query.order_by(column.desc() if sort.descending else column.asc(), model.id)

        if search is not None:
            for field in search.fields:
                if field not in SEARCH_FIELDS[model]:
                    raise ValueError(f'Cannot search {model.__name__} by {field!r}')

        try:
            records = query.all()
        except SQLAlchemyError as e:
            self._abort(f'Could not query {model.__name__}', e)
            raise StoreError(f'Could not query {model.__name__}') from e

        # SQLite's lower() only folds ASCII, so substring matching happens here
        if search is not None and search.text:
            needle = normalize_name(search.text)
            records = [
                r for r in records
                if any(needle in normalize_name(getattr(r, field)) for field in search.fields)
            ]

        return records

    # ------------------------------------------------------------------
    # Writes (staged until save)
    # ------------------------------------------------------------------

    def insert(self, record):
        model = type(record)

        if isinstance(record, RecipeIngredient) and record.recipe is None and record.recipe_id is None:
            raise ConstraintError('RecipeIngredient must belong to a recipe')

        with self.session.no_autoflush:
            existing = self.get(model, record.id)
        if existing is not None and existing is not record:
            raise ConstraintError(f'{model.__name__} with id {record.id} already exists')

        self.session.add(record)
        return record

    def update(self, record, **fields):
        model = type(record)
        if not inspect(record).persistent:
            raise ConstraintError(f'{model.__name__} {record.id} is not stored')

        attrs = inspect(model).attrs.keys()
        unknown = [key for key in fields if key == 'id' or key not in attrs]
        if unknown:
            raise ValueError(f'Cannot update {model.__name__} field(s): {", ".join(unknown)}')

        # Columns go first so a validator failure happens before any
        # relationship (and its back-populated collection) is touched
        columns = inspect(model).columns.keys()
        ordered = sorted(fields.items(), key=lambda item: item[0] not in columns)
        previous = {key: getattr(record, key) for key in fields if key in columns}

        try:
            for key, value in ordered:
                setattr(record, key, value)
        except ValueError:
            # Put back this record's columns only; other staged work stays pending
            for key, value in previous.items():
                setattr(record, key, value)
            raise
        return record

    def delete(self, record):
        """Stage deletion of a record and of whatever its delete rules reach."""
        model = type(record)
        record_id = record.id
        if not inspect(record).persistent:
            raise ConstraintError(f'{model.__name__} {record_id} is not stored')

        try:
            with self.session.no_autoflush:
                for attr, rule in DELETE_RULES[model]:
                    PROPAGATORS[rule](self.session, record, attr)
                self.session.delete(record)
        except SQLAlchemyError as e:
            self._abort(f'Could not delete {model.__name__} {record_id}', e)
            raise DeleteCascadeError(f'Could not delete {model.__name__} {record_id}') from e

        logger.debug('Staged delete of %r', record)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def save(self):
        """Commit pending work. On failure nothing is applied."""
        try:
            self.session.commit()
        except IntegrityError as e:
            self._abort('Commit rejected by a constraint', e)
            raise ConstraintError('Commit rejected by a constraint') from e
        except SQLAlchemyError as e:
            self._abort('Could not save changes', e)
            raise StoreError('Could not save changes') from e

    def rollback(self):
        self.session.rollback()

    def _abort(self, message, exc):
        self.session.rollback()
        logger.error('%s: %s', message, exc)
