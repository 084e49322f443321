"""
Tests for PageConfig geometry.
"""

import pytest

from report_toolkit.layout import PageConfig


class TestPageConfig:
    """Tests for PageConfig derived dimensions."""

    def test_defaults_when_created_then_landscape_letter_in_mm(self):
        # Act
        config = PageConfig()

        # Assert
        assert config.page_width == pytest.approx(279.4, abs=0.01)
        assert config.page_height == pytest.approx(215.9, abs=0.01)
        assert config.page_break_trigger == pytest.approx(195.9, abs=0.01)
        assert config.printable_width == pytest.approx(259.4, abs=0.01)

    def test_page_size_when_portrait_a4_in_points_then_short_side_first(self):
        config = PageConfig(orientation="P", unit="pt", paper="A4")
        width, height = config.page_size_pt
        assert width < height
        assert config.page_width == pytest.approx(595.27, abs=0.01)

    def test_scale_when_points_then_one(self, pt_config):
        assert pt_config.scale == 1.0
        assert pt_config.page_size_pt == (792.0, 612.0)
        assert pt_config.page_break_trigger == 592.0
        assert pt_config.printable_height == 582.0

    @pytest.mark.parametrize("kwargs, message", [
        ({"orientation": "X"}, "orientation"),
        ({"unit": "furlong"}, "Unknown unit"),
        ({"paper": "tabloid"}, "Unknown paper size"),
        ({"margin_left": -1}, "margin_left"),
        ({"margin_left": 150, "margin_right": 150}, "Margins exceed page width"),
        ({"margin_top": 100, "margin_bottom": 120}, "Margins exceed page height"),
    ])
    def test_init_when_invalid_then_raises_error(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            PageConfig(**kwargs)
