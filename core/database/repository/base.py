"""Base repository with dependency injection pattern."""

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel

from core.database.query import run_query
from core.database.sql import (
    FieldMap,
    FilterKey,
    build_filter_clause,
    build_update_clause,
)
from core.exceptions import InvalidArgumentError, NotFoundError
from core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """Base repository with dependency injection pattern.

    Subclasses declare their table layout as class attributes; partial
    updates and filtered listings are composed from those static tables only.
    """

    resource: ClassVar[str]
    key_columns: ClassVar[tuple[str, ...]] = ("id",)
    column_map: ClassVar[Mapping[str, str]] = {}
    updatable: ClassVar[frozenset[str] | None] = None
    filter_keys: ClassVar[tuple[FilterKey, ...]] = ()

    def __init__(self, model: type[T], db: Session) -> None:
        self.model = model
        self.db = db

    @property
    def table(self) -> str:
        return str(self.model.__tablename__)

    def create(self, obj: T) -> T:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            logger.debug(f"Created {self.resource} in {self.table}")
        except IntegrityError as exc:
            self.db.rollback()
            logger.info(f"Rejected {self.resource}: {exc.orig}")
            raise InvalidArgumentError(
                f"Invalid {self.resource}: duplicate key or unknown reference"
            ) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to create {self.resource}: {exc}")
            raise

        return obj

    def get_by_id(self, *key: int) -> T | None:
        """Get an object by its primary key (one value per key column)."""
        return self.db.get(self.model, key if len(key) > 1 else key[0])

    def get_or_raise(self, *key: int) -> T:
        obj = self.get_by_id(*key)
        if obj is None:
            raise NotFoundError(self._not_found_message(key))
        return obj

    def find_by(self, criteria: Mapping[str, Any] | None = None) -> list[T]:
        """List rows matching the recognized keys of ``criteria``.

        Empty criteria, or criteria without any recognized key, list every row.
        """
        sql = f"SELECT * FROM {self.table}"
        values: list[Any] = []

        if criteria:
            where = build_filter_clause(criteria, self.filter_keys)
            if where:
                sql += f" WHERE {where.clause}"
                values = where.values

        sql += f" ORDER BY {', '.join(self.key_columns)}"
        rows = run_query(self.db, sql, values)
        return [self.model.model_validate(row) for row in rows]

    def partial_update(self, key: Sequence[int], data: FieldMap) -> T | None:
        """Update only the supplied fields of one row.

        Args:
            key: Primary key values, in ``key_columns`` order
            data: Logical field names and new values

        Returns:
            The updated row, or None if no row has that key

        Raises:
            InvalidArgumentError: If ``data`` is empty or names a field that
                cannot be updated
        """
        set_clause = build_update_clause(data, self.column_map, self.updatable)
        key_predicates = [
            f'"{column}"=${set_clause.next_index + offset}'
            for offset, column in enumerate(self.key_columns)
        ]
        sql = (
            f"UPDATE {self.table} SET {set_clause.clause} "
            f"WHERE {' AND '.join(key_predicates)} RETURNING *"
        )

        try:
            rows = run_query(self.db, sql, [*set_clause.values, *key])
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to update {self.resource} {tuple(key)}: {exc}")
            raise

        if not rows:
            return None
        logger.debug(f"Updated {self.resource} {tuple(key)}: {set_clause.clause}")
        return self.model.model_validate(rows[0])

    def update_or_raise(self, key: Sequence[int], data: FieldMap) -> T:
        obj = self.partial_update(key, data)
        if obj is None:
            raise NotFoundError(self._not_found_message(tuple(key)))
        return obj

    def delete(self, *key: int) -> bool:
        """Delete an object by primary key.

        Rows referencing it are removed by the ON DELETE CASCADE foreign keys.
        """
        obj = self.get_by_id(*key)
        if obj is None:
            return False

        try:
            self.db.delete(obj)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to delete {self.resource} {key}: {exc}")
            raise

        logger.debug(f"Deleted {self.resource} {key}")
        return True

    def delete_or_raise(self, *key: int) -> None:
        if not self.delete(*key):
            raise NotFoundError(self._not_found_message(key))

    def _not_found_message(self, key: tuple[Any, ...]) -> str:
        return f"No {self.resource}: {', '.join(str(part) for part in key)}"
