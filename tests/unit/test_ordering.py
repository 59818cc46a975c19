"""Unit tests for listing order helpers."""

from datetime import datetime, timezone

from src.services.ordering import as_datetime, newest_first


class TestAsDatetime:
    """Tests for as_datetime."""

    def test_parses_zulu_string(self) -> None:
        assert as_datetime("2024-01-01T00:00:00Z") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_naive_values_are_utc(self) -> None:
        assert as_datetime("2024-01-01T12:30:00.123456").tzinfo == timezone.utc
        assert as_datetime(datetime(2024, 1, 1)).tzinfo == timezone.utc


class TestNewestFirst:
    """Tests for newest_first."""

    def test_orders_by_created_at_descending(self) -> None:
        rows = [
            {"id": 1, "created_at": "2024-01-01T00:00:00Z"},
            {"id": 2, "created_at": "2024-03-01T00:00:00Z"},
            {"id": 3, "created_at": "2024-02-01T00:00:00Z"},
        ]

        assert [row["id"] for row in newest_first(rows)] == [2, 3, 1]

    def test_ties_list_later_insert_first(self) -> None:
        stamp = "2024-01-01T00:00:00Z"
        rows = [{"id": i, "created_at": stamp} for i in (1, 2, 3)]

        assert [row["id"] for row in newest_first(rows)] == [3, 2, 1]
