"""Tests for the parameterized clause builders."""

import re

import pytest

from core.database.sql import (
    DEFAULT_FILTER_KEYS,
    ClauseResult,
    FilterKey,
    build_filter_clause,
    build_update_clause,
    to_number,
)
from core.exceptions import InvalidArgumentError

USER_COLUMNS = {"firstName": "first_name", "lastName": "last_name"}


def _placeholders(clause: str) -> list[int]:
    return [int(idx) for idx in re.findall(r"\$(\d+)", clause)]


class TestBuildUpdateClause:
    """Tests for build_update_clause."""

    def test_maps_columns_and_keeps_order(self) -> None:
        result = build_update_clause(
            {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
        )

        assert result.clause == '"first_name"=$1, "age"=$2'
        assert result.values == ["Aliya", 32]

    def test_unmapped_names_pass_through(self) -> None:
        result = build_update_clause({"age": 32})

        assert result.clause == '"age"=$1'
        assert result.values == [32]

    def test_accepts_ordered_pairs(self) -> None:
        result = build_update_clause(
            [("lastName", "Smith"), ("firstName", "Ann")], USER_COLUMNS
        )

        assert result.clause == '"last_name"=$1, "first_name"=$2'
        assert result.values == ["Smith", "Ann"]

    def test_placeholders_are_contiguous(self) -> None:
        fields = {f"col{i}": i for i in range(7)}
        result = build_update_clause(fields)

        assert _placeholders(result.clause) == list(range(1, 8))
        assert len(result.values) == 7
        assert result.next_index == 8

    def test_is_deterministic(self) -> None:
        fields = {"firstName": "Aliya", "profilePicture": None, "age": 32}

        first = build_update_clause(fields, USER_COLUMNS)
        second = build_update_clause(dict(fields), dict(USER_COLUMNS))

        assert first == second

    def test_none_values_are_bound(self) -> None:
        result = build_update_clause({"profile_picture": None})

        assert result.clause == '"profile_picture"=$1'
        assert result.values == [None]

    @pytest.mark.parametrize("fields", [{}, []])
    def test_rejects_empty_input(self, fields) -> None:
        with pytest.raises(InvalidArgumentError, match="No data"):
            build_update_clause(fields)

    def test_rejects_fields_outside_allow_list(self) -> None:
        with pytest.raises(InvalidArgumentError, match="cannot be updated"):
            build_update_clause(
                {"firstName": "Ann", "email": "x@y.z"},
                USER_COLUMNS,
                allowed={"firstName", "lastName"},
            )

    def test_allow_list_accepts_known_fields(self) -> None:
        result = build_update_clause(
            {"lastName": "Lee"}, USER_COLUMNS, allowed={"firstName", "lastName"}
        )

        assert result.clause == '"last_name"=$1'

    def test_rejects_duplicate_pairs(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Duplicate"):
            build_update_clause([("age", 1), ("age", 2)])

    def test_values_are_never_interpolated(self) -> None:
        payload = "x'; DROP TABLE users; --"
        result = build_update_clause({"firstName": payload}, USER_COLUMNS)

        assert payload not in result.clause
        assert result.values == [payload]


class TestBuildFilterClause:
    """Tests for build_filter_clause."""

    def test_single_key(self) -> None:
        result = build_filter_clause({"buddy": "2"})

        assert result.clause == "buddy=$1"
        assert result.values == [2]

    def test_uses_declaration_order(self) -> None:
        result = build_filter_clause({"createdBy": "1", "buddy": "2"})

        assert result.clause == "buddy=$1 AND created_by=$2"
        assert result.values == [2, 1]

    def test_all_default_keys(self) -> None:
        result = build_filter_clause(
            {"email": "a@b.co", "createdBy": 4, "buddy": "7"}
        )

        assert result.clause == "buddy=$1 AND created_by=$2 AND email=$3"
        assert result.values == [7, 4, "a@b.co"]

    def test_unrecognized_keys_are_ignored(self) -> None:
        result = build_filter_clause({"buddy": "2", "foo": "bar"})

        assert result.clause == "buddy=$1"
        assert result.values == [2]

    def test_only_unrecognized_keys_give_empty_result(self) -> None:
        result = build_filter_clause({"foo": "bar"})

        assert result == ClauseResult("", [])
        assert not result

    def test_falsy_values_are_skipped(self) -> None:
        result = build_filter_clause({"buddy": "", "createdBy": "3", "email": None})

        assert result.clause == "created_by=$1"
        assert result.values == [3]

    def test_rejects_empty_criteria(self) -> None:
        with pytest.raises(InvalidArgumentError, match="No filtering criteria"):
            build_filter_clause({})

    def test_rejects_non_numeric_value(self) -> None:
        with pytest.raises(InvalidArgumentError):
            build_filter_clause({"buddy": "abc"})

    def test_email_is_not_coerced(self) -> None:
        result = build_filter_clause({"email": "123"})

        assert result.values == ["123"]

    def test_custom_filter_keys(self) -> None:
        keys = (
            FilterKey("buddyreadId", "buddyread_id", to_number),
            FilterKey("userId", "user_id", to_number),
        )
        result = build_filter_clause({"userId": "5", "buddy": "1"}, keys)

        assert result.clause == "user_id=$1"
        assert result.values == [5]

    def test_default_keys(self) -> None:
        assert [key.name for key in DEFAULT_FILTER_KEYS] == [
            "buddy",
            "createdBy",
            "email",
        ]

    def test_placeholder_count_matches_values(self) -> None:
        result = build_filter_clause({"buddy": 1, "createdBy": 2, "email": "e"})

        assert _placeholders(result.clause) == [1, 2, 3]
        assert result.next_index == 4


@pytest.mark.parametrize(
    "value,expected",
    [("2", 2), ("2.5", 2.5), (" 7 ", 7), (3, 3), (1.5, 1.5)],
)
def test_to_number(value, expected) -> None:
    assert to_number(value) == expected
    assert type(to_number(value)) is type(expected)


@pytest.mark.parametrize("value", ["abc", "", True, None])
def test_to_number_rejects(value) -> None:
    with pytest.raises(InvalidArgumentError):
        to_number(value)
