"""Tests for CSV/JSON store list parsing and loading."""

import pytest

from src.adapters.memory_bundle import MemoryBundle
from src.core.errors import DecodeFailureError, ErrorCategory
from src.core.loaders import (
    load_items,
    parse_csv,
    parse_items,
    parse_json,
    split_csv_line,
)
from src.core.locations import DataSource, SourceFormat

CSV_SOURCE = DataSource("information", "WhatoEat", "information", SourceFormat.CSV)
JSON_SOURCE = DataSource("back_door", "後門", "back_door", SourceFormat.JSON)


class TestSplitCsvLine:
    def test_plain_fields(self) -> None:
        assert split_csv_line("a,b,c") == ["a", "b", "c"]

    def test_quoted_comma_is_kept(self) -> None:
        assert split_csv_line('Name,"A, B"') == ["Name", "A, B"]

    def test_unterminated_quote_runs_to_end_of_line(self) -> None:
        assert split_csv_line('Name,"A, B') == ["Name", "A, B"]

    def test_quote_after_leading_space(self) -> None:
        assert split_csv_line('Name, "A, B"') == ["Name", " A, B"]

    def test_quote_mid_field(self) -> None:
        assert split_csv_line('Name,He said "hi, there"') == [
            "Name",
            "He said hi, there",
        ]

    def test_empty_fields_kept(self) -> None:
        assert split_csv_line(",,") == ["", "", ""]


class TestParseCsv:
    def test_quoted_description(self) -> None:
        items = parse_csv('Name,"A, B"')
        assert len(items) == 1
        assert items[0].name == "Name"
        assert items[0].description == "A, B"

    def test_blank_lines_skipped(self) -> None:
        assert parse_csv("\n   \n\n") == []

    def test_single_field_line_dropped(self) -> None:
        assert parse_csv("lonely") == []

    def test_first_line_is_a_record(self) -> None:
        items = parse_csv("name,description\nRamen,Tonkotsu")
        assert [item.name for item in items] == ["name", "Ramen"]

    def test_extra_fields_ignored_and_whitespace_trimmed(self) -> None:
        items = parse_csv("  Ramen , Tonkotsu , 120 , extra\r\n")
        assert len(items) == 1
        assert items[0].name == "Ramen"
        assert items[0].description == "Tonkotsu"

    def test_unterminated_quote_stays_on_its_line(self) -> None:
        items = parse_csv('Ramen,Tonkotsu\nOpen,"unterminated\nPho,Beef')
        assert [item.name for item in items] == ["Ramen", "Open", "Pho"]
        assert items[1].description == "unterminated"

    def test_spaced_quoted_description(self) -> None:
        items = parse_csv('Name, "A, B"')
        assert [(item.name, item.description) for item in items] == [("Name", "A, B")]

    def test_quoted_text_inside_description(self) -> None:
        items = parse_csv('Name,He said "hi, there"')
        assert items[0].description == "He said hi, there"

    def test_quoted_name_with_comma(self) -> None:
        items = parse_csv('"Mos, Burger",Rice burger')
        assert items[0].name == "Mos, Burger"
        assert items[0].description == "Rice burger"

    def test_byte_order_mark_stripped(self) -> None:
        items = parse_csv("\ufeffRamen,Tonkotsu")
        assert items[0].name == "Ramen"

    def test_unicode_content(self) -> None:
        items = parse_csv('麥當勞,"漢堡, 薯條"')
        assert items[0].name == "麥當勞"
        assert items[0].description == "漢堡, 薯條"


class TestParseJson:
    def test_full_record(self) -> None:
        items = parse_json(
            '[{"stores": "Bento", "description": "Pork chop", "filename": "bento",'
            ' "x": 1, "y": 2.5, "hours": {"Mon-Fri": "10:00-19:00"}}]'
        )
        assert len(items) == 1
        item = items[0]
        assert item.name == "Bento"
        assert item.description == "Pork chop"
        assert item.filename == "bento"
        assert item.coordinates == (1.0, 2.5)
        assert dict(item.hours) == {"Mon-Fri": "10:00-19:00"}

    def test_optional_keys_may_be_absent(self) -> None:
        items = parse_json('[{"stores": "Bento", "description": "Pork chop"}]')
        assert items[0].coordinates is None
        assert items[0].filename is None

    def test_empty_array(self) -> None:
        assert parse_json("[]") == []

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(DecodeFailureError) as exc_info:
            parse_json("[{")
        assert exc_info.value.category == ErrorCategory.DECODE_FAILURE

    def test_one_bad_record_rejects_whole_file(self) -> None:
        with pytest.raises(DecodeFailureError):
            parse_json(
                '[{"stores": "Bento", "description": "ok"},'
                ' {"description": "missing name"}]'
            )

    def test_non_string_hours_rejected(self) -> None:
        with pytest.raises(DecodeFailureError):
            parse_json('[{"stores": "A", "description": "b", "hours": {"Mon": [1]}}]')


class TestParseItems:
    def test_dispatches_on_format(self) -> None:
        assert parse_items("a,b", SourceFormat.CSV)[0].name == "a"
        assert parse_items('[{"stores": "a", "description": "b"}]', SourceFormat.JSON)[0].name == "a"


class TestLoadItems:
    def test_loads_csv_source(self, memory_bundle: MemoryBundle) -> None:
        items = load_items(memory_bundle, CSV_SOURCE)
        assert [item.name for item in items] == ["Ramen", "Pho"]
        assert items[1].description == "Beef, herbs"

    def test_loads_json_source(self, memory_bundle: MemoryBundle) -> None:
        items = load_items(memory_bundle, JSON_SOURCE)
        assert [item.name for item in items] == ["Bento"]

    def test_missing_resource_degrades_to_empty(self) -> None:
        assert load_items(MemoryBundle(), CSV_SOURCE) == []

    def test_malformed_json_degrades_to_empty(self) -> None:
        bundle = MemoryBundle({"back_door.json": "not json"})
        assert load_items(bundle, JSON_SOURCE) == []

    def test_undecodable_bytes_degrade_to_empty(self) -> None:
        bundle = MemoryBundle({"information.csv": b"\xff\xfe\xfa,broken"})
        assert load_items(bundle, CSV_SOURCE) == []
