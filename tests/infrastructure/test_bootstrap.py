"""
Тесты для сборки приложения и демонстрационного сценария.
"""

from hotel_ops import bootstrap_app
from hotel_ops.__main__ import main
from hotel_ops.config import HotelSettings
from hotel_ops.reporting.application import ReportApplicationService


class TestBootstrapApp:
    """Тесты для bootstrap_app."""

    def test_services_share_state(self, mock_logger):
        app = bootstrap_app(settings=HotelSettings(_env_file=None), logger=mock_logger)

        booking = app["booking_service"].create_booking(1, "Jane Smith", "2024-06-01", "2024-06-04")

        assert app["state"].bookings.list_all() == [booking]
        assert app["query_service"].search("bookings", "jane") == [booking]
        assert app["report_service"].build_report().total_bookings == 1

    def test_settings_are_applied(self, mock_logger):
        settings = HotelSettings(
            _env_file=None,
            currency_symbol="€",
            report_filename_prefix="grand-hotel",
            id_start=100,
        )
        app = bootstrap_app(settings=settings, logger=mock_logger)

        bill = app["billing_service"].generate_bill("Jane Smith", "101", 1, 80)
        filename, content = app["report_service"].export_report()

        assert bill.id == 100
        assert filename.startswith("grand-hotel-")
        assert "- Total Revenue: €80.00" in content
        assert isinstance(app["report_service"], ReportApplicationService)

    def test_json_report_is_available(self, mock_logger):
        app = bootstrap_app(settings=HotelSettings(_env_file=None), logger=mock_logger)

        filename, _ = app["report_service"].export_report("json")

        assert filename.endswith(".json")


class TestMain:
    """Тесты для демонстрационного сценария."""

    def test_main_writes_report(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == 0

        files = list(tmp_path.glob("hotel-report-*.txt"))
        assert len(files) == 1
        content = files[0].read_text(encoding="utf-8")
        assert "- Total Bookings: 1" in content
        assert "- Total Orders: 1" in content
        assert "Jane Smith <jane@example.com>" in capsys.readouterr().out
