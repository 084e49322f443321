"""
Tests for the ReportLab drawing surface.
"""

import fitz  # PyMuPDF
import pytest

from report_toolkit.core.models import BLACK, WHITE
from report_toolkit.output import (
    FinalizeError,
    FontNotFoundError,
    ImageAssetError,
    ReportLabBackend,
)


@pytest.fixture
def backend():
    b = ReportLabBackend(title="Daily Report", author="Sales")
    b.add_page(792, 612)
    return b


class TestFontResolution:
    """Tests for resolve_font()."""

    @pytest.mark.parametrize("family, style, expected", [
        ("Times", "", "Times-Roman"),
        ("Times", "B", "Times-Bold"),
        ("times", "BI", "Times-BoldItalic"),
        ("Helvetica", "I", "Helvetica-Oblique"),
        ("Arial", "B", "Helvetica-Bold"),
        ("Courier", "", "Courier"),
    ])
    def test_resolve_font_when_standard_family_then_postscript_name(self, family, style, expected):
        assert ReportLabBackend().resolve_font(family, style) == expected

    def test_resolve_font_when_unknown_family_then_raises_error(self):
        with pytest.raises(FontNotFoundError, match="Comic"):
            ReportLabBackend().resolve_font("Comic", "")

    def test_string_width_when_longer_text_then_wider(self):
        backend = ReportLabBackend()
        assert backend.string_width("9.99", "Times-Roman", 16) > backend.string_width("9", "Times-Roman", 16)


class TestDocument:
    """Tests for pages, drawing and finalize()."""

    def test_finalize_when_no_pages_then_raises_error(self):
        with pytest.raises(FinalizeError, match="no pages"):
            ReportLabBackend().finalize()

    def test_draw_text_when_no_page_then_raises_error(self):
        with pytest.raises(FinalizeError):
            ReportLabBackend().draw_text(10, 10, "x", color=BLACK)

    def test_finalize_when_drawn_then_valid_pdf(self, backend):
        # Arrange
        backend.set_font("Times-Roman", 16)
        backend.draw_rect(28, 28, 113, 20, fill=True, stroke=True, fill_color=WHITE, line_width=0.5)
        backend.draw_text(31, 42, "Widget", color=BLACK)
        backend.add_page(792, 612)

        # Act
        data = backend.finalize()

        # Assert
        assert data.startswith(b"%PDF-")
        assert backend.page_count == 2
        with fitz.open(stream=data, filetype="pdf") as doc:
            assert doc.page_count == 2
            assert "Widget" in doc[0].get_text()
            assert doc.metadata["title"] == "Daily Report"
            assert doc.metadata["author"] == "Sales"

    def test_draw_text_when_top_down_baseline_then_flipped_in_pdf(self, backend):
        # Arrange
        backend.set_font("Helvetica", 12)
        backend.draw_text(100, 100, "Top", color=BLACK)

        # Act
        data = backend.finalize()

        # Assert
        with fitz.open(stream=data, filetype="pdf") as doc:
            [rect] = doc[0].search_for("Top")
            assert rect.x0 == pytest.approx(100, abs=1.5)
            assert rect.y1 == pytest.approx(100, abs=4)

    def test_finalize_when_called_twice_then_same_bytes(self, backend):
        assert backend.finalize() == backend.finalize()


class TestImages:
    """Tests for image_size() and draw_image()."""

    def test_image_size_when_png_then_pixel_dimensions(self, sample_image):
        assert ReportLabBackend().image_size(sample_image) == (200, 100)

    def test_image_size_when_missing_then_raises_error(self, tmp_path):
        with pytest.raises(ImageAssetError, match="not found"):
            ReportLabBackend().image_size(tmp_path / "stats.png")

    def test_image_size_when_not_an_image_then_raises_error(self, tmp_path):
        path = tmp_path / "stats.png"
        path.write_text("not an image")
        with pytest.raises(ImageAssetError, match="cannot decode"):
            ReportLabBackend().image_size(path)

    def test_draw_image_when_placed_then_embedded(self, backend, sample_image):
        # Act
        backend.draw_image(sample_image, 637.8, 28.35, 70.9, 70.9)
        data = backend.finalize()

        # Assert
        with fitz.open(stream=data, filetype="pdf") as doc:
            assert len(doc[0].get_images()) == 1
