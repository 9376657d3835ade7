"""Parameterized SQL clause builders for partial updates and filters.

Both builders emit text that uses positional ``$n`` placeholders plus the list
of values bound to them. Values are never interpolated into the text; only the
column names are, so names must always come from static tables defined in code.
"""

from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable

from core.exceptions import InvalidArgumentError

FieldMap = Mapping[str, Any] | Iterable[tuple[str, Any]]


@dataclass(frozen=True)
class ClauseResult:
    """SQL fragment and the values bound to its placeholders.

    ``values[i]`` binds placeholder ``$<i + 1>``.
    """

    clause: str
    values: list[Any] = field(default_factory=list)

    @property
    def next_index(self) -> int:
        """Index of the first placeholder a caller may append."""
        return len(self.values) + 1

    def __bool__(self) -> bool:
        return bool(self.clause)


def to_number(value: Any) -> int | float:
    """Coerce a query-string style value to a number.

    Raises:
        InvalidArgumentError: If the value is not numeric
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value

    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise InvalidArgumentError(f"Expected a number, got {value!r}") from None


@dataclass(frozen=True)
class FilterKey:
    """A recognized filter key and the column it compares against."""

    name: str
    column: str
    coerce: Callable[[Any], Any] | None = None

    def convert(self, value: Any) -> Any:
        return self.coerce(value) if self.coerce else value


DEFAULT_FILTER_KEYS: tuple[FilterKey, ...] = (
    FilterKey("buddy", "buddy", to_number),
    FilterKey("createdBy", "created_by", to_number),
    FilterKey("email", "email"),
)


def _ordered_pairs(fields: FieldMap) -> list[tuple[str, Any]]:
    if isinstance(fields, Mapping):
        return list(fields.items())

    pairs = [(name, value) for name, value in fields]
    names = [name for name, _ in pairs]
    if len(set(names)) != len(names):
        raise InvalidArgumentError(f"Duplicate fields in update: {names}")
    return pairs


def build_update_clause(
    fields: FieldMap,
    column_map: Mapping[str, str] | None = None,
    allowed: Collection[str] | None = None,
) -> ClauseResult:
    """Build the assignment list of a partial UPDATE statement.

    Args:
        fields: Logical field names and their new values, either a mapping or
            an ordered sequence of (name, value) pairs; order is preserved
        column_map: Logical name to column name; unmapped names are used as-is
        allowed: Optional allow-list of logical names that may be updated

    Returns:
        ClauseResult without the SET keyword. Callers append further
        predicates starting at ``result.next_index``.

    Raises:
        InvalidArgumentError: If no fields are given, a name repeats, or a
            name is outside ``allowed``

    Example:
        >>> build_update_clause({"firstName": "Aliya", "age": 32},
        ...                     {"firstName": "first_name"})
        ClauseResult(clause='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    pairs = _ordered_pairs(fields)
    if not pairs:
        raise InvalidArgumentError("No data")

    if allowed is not None:
        rejected = [name for name, _ in pairs if name not in allowed]
        if rejected:
            raise InvalidArgumentError(f"Fields cannot be updated: {rejected}")

    column_map = column_map or {}
    assignments = [
        f'"{column_map.get(name, name)}"=${idx}'
        for idx, (name, _) in enumerate(pairs, start=1)
    ]
    return ClauseResult(", ".join(assignments), [value for _, value in pairs])


def build_filter_clause(
    criteria: Mapping[str, Any],
    filter_keys: Sequence[FilterKey] = DEFAULT_FILTER_KEYS,
) -> ClauseResult:
    """Build an equality conjunction for a WHERE clause.

    Keys are evaluated in the declaration order of ``filter_keys``, not in the
    order of ``criteria``. Keys with falsy values and keys that are not
    declared are skipped.

    Args:
        criteria: Filter values keyed by logical name
        filter_keys: Recognized keys for this call site

    Returns:
        ClauseResult without the WHERE keyword; the clause is empty when no
        declared key matched.

    Raises:
        InvalidArgumentError: If ``criteria`` is empty or a numeric key has a
            non-numeric value

    Example:
        >>> build_filter_clause({"createdBy": "1", "buddy": "2"})
        ClauseResult(clause='buddy=$1 AND created_by=$2', values=[2, 1])
    """
    if not criteria:
        raise InvalidArgumentError("No filtering criteria")

    predicates: list[str] = []
    values: list[Any] = []
    for key in filter_keys:
        value = criteria.get(key.name)
        if not value:
            continue
        values.append(key.convert(value))
        predicates.append(f"{key.column}=${len(values)}")

    return ClauseResult(" AND ".join(predicates), values)
