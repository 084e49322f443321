"""
Tests for the report pipeline.
"""

from datetime import date

import pytest

from report_toolkit.core.models import Dataset, FontSpec, Style
from report_toolkit.report import (
    ImageSpec,
    ReportConfig,
    ReportError,
    generate_report,
    render_pdf,
)

TODAY = date(2018, 1, 16)


@pytest.fixture
def config(sample_image, tmp_path):
    return ReportConfig(image=ImageSpec(sample_image), output_path=tmp_path / "report.pdf")


@pytest.fixture
def orders():
    return Dataset.from_rows([["Date", "Qty"], ["2018-01-16", "3"]])


class TestRenderPdf:
    """Tests for render_pdf()."""

    def test_render_pdf_when_clean_then_bytes_and_page_count(self, recording_backend, orders, config):
        data, pages = render_pdf(orders, config, today=TODAY, backend=recording_backend)
        assert data == b"%PDF-recorded"
        assert pages == 1

    def test_render_pdf_when_alignment_mismatch_then_report_error(self, recording_backend, orders):
        config = ReportConfig(alignments=("L",), image=None)
        with pytest.raises(ReportError, match="Invalid report configuration"):
            render_pdf(orders, config, backend=recording_backend)

    def test_render_pdf_when_default_alignments_too_short_then_report_error(self, recording_backend):
        dataset = Dataset.from_rows([[f"H{i}" for i in range(7)], ["x"] * 7])
        with pytest.raises(ReportError, match="Invalid report configuration"):
            render_pdf(dataset, ReportConfig(image=None), backend=recording_backend)
        assert recording_backend.pages == 0

    def test_render_pdf_when_font_fault_then_report_error_with_first_fault(
        self, recording_backend, orders
    ):
        # Arrange
        config = ReportConfig(header_style=Style(FontSpec("Comic", "", 16)), image=None)

        # Act & Assert
        with pytest.raises(ReportError, match="Failed creating PDF report: font: .*Comic"):
            render_pdf(orders, config, backend=recording_backend)

    def test_render_pdf_when_default_image_missing_then_report_error(
        self, recording_backend, orders, tmp_path, monkeypatch
    ):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ReportError, match="stats.png"):
            render_pdf(orders, ReportConfig(), backend=recording_backend)


class TestGenerateReport:
    """Tests for generate_report() with the ReportLab backend."""

    def test_generate_report_when_valid_input_then_pdf_written(self, sample_csv, config):
        # Act
        result = generate_report(sample_csv, config=config, today=TODAY)

        # Assert
        assert result.output_path == config.output_path
        assert result.output_path.read_bytes().startswith(b"%PDF-")
        assert result.page_count == 1
        assert result.row_count == 1
        assert result.byte_count == result.output_path.stat().st_size

    def test_generate_report_when_output_path_given_then_overrides_config(self, sample_csv, config, tmp_path):
        target = tmp_path / "nested" / "orders.pdf"
        result = generate_report(sample_csv, target, config)
        assert result.output_path == target
        assert target.exists()
        assert not config.output_path.exists()

    def test_generate_report_when_input_missing_then_report_error(self, tmp_path, config):
        with pytest.raises(ReportError, match="file not found"):
            generate_report(tmp_path / "ordersReport.csv", config=config)

    def test_generate_report_when_output_unwritable_then_report_error(self, sample_csv, config, tmp_path):
        with pytest.raises(ReportError, match="Cannot save PDF"):
            generate_report(sample_csv, tmp_path, config)

    def test_generate_report_when_render_fails_then_no_file_written(self, sample_csv, tmp_path):
        # Arrange
        config = ReportConfig(image=ImageSpec(tmp_path / "missing.png"), output_path=tmp_path / "report.pdf")

        # Act
        with pytest.raises(ReportError, match="Failed creating PDF report"):
            generate_report(sample_csv, config=config)

        # Assert
        assert not (tmp_path / "report.pdf").exists()
