"""
Тесты для поиска и сводного отчета.
"""

import pytest

from hotel_ops.catalog import default_seed
from hotel_ops.reporting.domain import MATCHERS, Report, SearchKind, filter_records


class TestSearch:
    """Тесты для правил поиска."""

    def test_every_kind_has_matcher(self):
        assert set(MATCHERS) == set(SearchKind)

    @pytest.mark.parametrize(
        "query, expected",
        [
            ("jane", ["Jane Smith"]),
            ("JANE", ["Jane Smith"]),
            ("mike@", ["Mike Johnson"]),
            ("555-0101", ["John Doe"]),
            ("example.com", ["John Doe", "Jane Smith", "Mike Johnson"]),
            ("nobody", []),
        ],
    )
    def test_guest_search(self, query, expected):
        guests = default_seed().guests

        result = filter_records(SearchKind.GUESTS, guests, query)

        assert [guest.name for guest in result] == expected

    @pytest.mark.parametrize("query", ["", None])
    def test_empty_query_matches_everything(self, query):
        guests = default_seed().guests

        assert filter_records(SearchKind.GUESTS, guests, query) == guests


class TestReport:
    """Тесты для сводного отчета."""

    def test_report_on_default_seed(self):
        report = Report.build(
            default_seed().rooms, total_bookings=0, total_orders=0, total_revenue=0
        )

        assert report.total_rooms == 8
        assert report.available_rooms == 5
        assert report.occupied_rooms == 2
        assert report.total_bookings == 0
        assert report.total_orders == 0
        assert report.total_revenue == 0

    def test_to_dict_sections(self):
        report = Report.build(
            default_seed().rooms, total_bookings=0, total_orders=0, total_revenue=0
        )

        data = report.to_dict()

        assert data["rooms"] == {"total": 8, "available": 5, "occupied": 2}
        assert data["operations"] == {"total_bookings": 0, "total_orders": 0}
        assert data["financial"] == {"total_revenue": 0}
        assert data["generated_at"] == report.generated_at.isoformat()
