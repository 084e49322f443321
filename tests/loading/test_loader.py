"""
Tests for CSV loading.
"""

from pathlib import Path

import pytest

from report_toolkit.loading import DEFAULT_INPUT, LoaderError, default_input_path, load_dataset


class TestDefaultInputPath:
    def test_default_input_path_when_no_args_then_orders_report(self):
        assert default_input_path([]) == DEFAULT_INPUT == Path("ordersReport.csv")

    def test_default_input_path_when_arg_given_then_uses_it(self):
        assert default_input_path(["daily.csv", "ignored"]) == Path("daily.csv")


class TestLoadDataset:
    """Tests for load_dataset()."""

    def test_load_dataset_when_valid_csv_then_header_and_rows(self, sample_csv):
        # Act
        dataset = load_dataset(sample_csv)

        # Assert
        assert dataset.header == ("Date", "Qty", "Item", "Price")
        assert dataset.body == (("2018-01-16", "3", "Widget", "9.99"),)

    def test_load_dataset_when_quoted_commas_then_single_field(self, tmp_path):
        path = tmp_path / "quoted.csv"
        path.write_text('Item,Price\n"Bolts, M4",0.10\n', encoding="utf-8")
        assert load_dataset(path).body == (("Bolts, M4", "0.10"),)

    def test_load_dataset_when_blank_lines_and_bom_then_ignored(self, tmp_path):
        # Arrange
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufeffA,B\n\n1,2\n\n".encode("utf-8"))

        # Act
        dataset = load_dataset(path)

        # Assert
        assert dataset.header == ("A", "B")
        assert dataset.row_count == 1

    def test_load_dataset_when_header_only_then_zero_rows(self, tmp_path):
        path = tmp_path / "header.csv"
        path.write_text("A,B,C\n", encoding="utf-8")
        assert load_dataset(path).row_count == 0

    def test_load_dataset_when_semicolon_delimiter_then_split(self, tmp_path):
        path = tmp_path / "semi.csv"
        path.write_text("A;B\n1;2\n", encoding="utf-8")
        assert load_dataset(path, delimiter=";").body == (("1", "2"),)

    def test_load_dataset_when_missing_then_raises_error(self, tmp_path):
        with pytest.raises(LoaderError, match="file not found"):
            load_dataset(tmp_path / "ordersReport.csv")

    def test_load_dataset_when_empty_then_raises_error(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(LoaderError, match="No data"):
            load_dataset(path)

    def test_load_dataset_when_ragged_then_raises_error(self, tmp_path):
        path = tmp_path / "ragged.csv"
        path.write_text("A,B\n1,2,3\n", encoding="utf-8")
        with pytest.raises(LoaderError, match="Malformed table"):
            load_dataset(path)

    def test_load_dataset_when_unterminated_quote_then_raises_error(self, tmp_path):
        path = tmp_path / "broken.csv"
        path.write_text('A,B\n"1,2\n', encoding="utf-8")
        with pytest.raises(LoaderError, match="Cannot read CSV data"):
            load_dataset(path)
