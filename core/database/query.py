"""Execution of ``$n``-style parameterized SQL through SQLAlchemy."""

import re
from collections.abc import Sequence
from typing import Any

from sqlalchemy import text
from sqlmodel import Session

from core.types import RepositoryRowType

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


def bind_positional(sql: str, values: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """Rewrite ``$n`` placeholders as SQLAlchemy bind parameters.

    Args:
        sql: SQL text with ``$1``, ``$2``, ... placeholders
        values: Values for the placeholders, in order

    Returns:
        Tuple of (sql with ``:pN`` parameters, parameter dict)

    Raises:
        ValueError: If a placeholder has no value or a value is never referenced

    Example:
        >>> bind_positional('UPDATE t SET "a"=$1 WHERE id = $2', ["x", 3])
        ('UPDATE t SET "a"=:p1 WHERE id = :p2', {'p1': 'x', 'p2': 3})
    """
    indexes = {int(idx) for idx in PLACEHOLDER_PATTERN.findall(sql)}
    if indexes != set(range(1, len(values) + 1)):
        raise ValueError(
            f"Placeholders {sorted(indexes)} do not match {len(values)} values"
        )

    bound_sql = PLACEHOLDER_PATTERN.sub(lambda m: f":p{m.group(1)}", sql)
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return bound_sql, params


def run_query(
    session: Session, sql: str, values: Sequence[Any] = ()
) -> list[RepositoryRowType]:
    """Execute SQL with positional values and return the rows as dicts."""
    bound_sql, params = bind_positional(sql, values)
    result = session.exec(text(bound_sql), params=params)  # type: ignore[call-overload]
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
