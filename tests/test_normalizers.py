"""Tests for the per-cell normalizers."""
from datetime import datetime, timezone

import pytest

from santos_lineup.models import CargoCategory
from santos_lineup.normalizers import (
    LengthDraft,
    classify_cargo,
    clean_operation,
    extract_imo,
    format_length_draft,
    local_timezone,
    parse_arrival,
    parse_length_draft,
    translate_flag,
    translate_goods,
    translate_notice,
)


class TestLengthDraft:

    @pytest.mark.parametrize("text,expected", [
        ("183/10.5", (183.0, 10.5)),
        ("183 10,5", (183.0, 10.5)),
        ("183,5 / 10,5", (183.5, 10.5)),
        ("366/15,5", (366.0, 15.5)),
        ("18310.5", (183.0, 10.5)),
        ("22514", (225.0, 14.0)),
        ("9912.5", (99.0, 12.5)),
    ])
    def test_recognized_forms(self, text, expected):
        assert parse_length_draft(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "183m", "1/2/3", "12"])
    def test_unparseable_is_unavailable(self, text):
        assert parse_length_draft(text) == LengthDraft(None, None)

    @pytest.mark.parametrize("pair", [
        (183.0, 10.5), (99.0, 12.25), (300.0, 9.0), (183.0, 10.123456789), (1234567.0, 10.0),
    ])
    def test_canonical_output_reparses_to_same_pair(self, pair):
        assert parse_length_draft(format_length_draft(*pair)) == pair

    def test_canonical_output_keeps_every_digit(self):
        assert format_length_draft(183.0, 10.123456789) == "183/10.123456789"
        assert format_length_draft(1234567.0, 10.0) == "1234567/10"


class TestArrival:

    def test_full_date_and_time(self):
        iso, ts = parse_arrival("16/09/2025 00:54")
        assert iso == "2025-09-16T00:54:00-03:00"
        assert ts == int(datetime(2025, 9, 16, 3, 54, tzinfo=timezone.utc).timestamp()) * 1000

    def test_missing_year_uses_current_year(self):
        iso, ts = parse_arrival("07/09 8h", now=datetime(2026, 1, 5, 10, 0))
        assert iso == "2026-09-07T08:00:00-03:00"
        assert ts == int(datetime(2026, 9, 7, 11, 0, tzinfo=timezone.utc).timestamp()) * 1000

    def test_missing_year_defaults_to_this_year(self):
        year = datetime.now(local_timezone()).year
        iso, _ = parse_arrival("07/09 8h")
        assert iso == f"{year}-09-07T08:00:00-03:00"

    def test_missing_time_is_midnight(self):
        iso, _ = parse_arrival("01-02-2025")
        assert iso == "2025-02-01T00:00:00-03:00"

    def test_two_digit_year(self):
        iso, _ = parse_arrival("31/12/25 23:59")
        assert iso == "2025-12-31T23:59:00-03:00"

    @pytest.mark.parametrize("text", ["32/13 25:70", "30/02/2025", "15/09/2025 24:00", "amanhã", "", None])
    def test_invalid_is_unavailable(self, text):
        assert parse_arrival(text) == (None, None)

    @pytest.mark.parametrize("text", ["16/09/20251", "01/02/202", "1/2/3", "16/09/2025 123"])
    def test_trailing_digits_are_not_guessed_away(self, text):
        assert parse_arrival(text, now=datetime(2025, 1, 1)) == (None, None)

    def test_iso_and_ts_come_together(self):
        for text in ["16/09/2025 00:54", "99/99", "07/09 8h", "x"]:
            iso, ts = parse_arrival(text, now=datetime(2025, 1, 1))
            assert (iso is None) == (ts is None)


class TestNotice:

    @pytest.mark.parametrize("code,expected", [
        ("EMB", "Load"),
        ("emb", "Load"),
        ("DESC", "Unload"),
        ("EMBDESC", "Load & Unload"),
        ("DESC/EMB", "Load & Unload"),
        ("XYZ", "XYZ"),
    ])
    def test_translation(self, code, expected):
        assert translate_notice(code) == expected

    def test_blank(self):
        assert translate_notice("  ") is None


class TestFlag:

    @pytest.mark.parametrize("flag,expected", [
        ("PANAMÁ", "Panama"),
        ("Libéria", "Liberia"),
        ("ILHAS MARSHALL", "Marshall Islands"),
        ("Reino Unido", "United Kingdom"),
        ("PANAMENHO(A)", "Panama"),
        ("Maltês.", "Malta"),
    ])
    def test_known_countries(self, flag, expected):
        assert translate_flag(flag) == expected

    def test_unknown_is_capitalized_copy(self):
        assert translate_flag("NOVA ZELÂNDIA") == "Nova Zelândia"

    def test_blank(self):
        assert translate_flag("") is None


class TestGoods:

    def test_exact_match(self):
        assert translate_goods("FARELO DE SOJA") == "Soybean meal"

    def test_contained_phrase(self):
        assert translate_goods("MILHO A GRANEL") == "Corn"

    def test_unknown(self):
        assert translate_goods("PEÇAS DIVERSAS") is None
        assert translate_goods(None) is None


class TestCargoCategory:

    def test_container_wins_over_bulk(self):
        assert classify_cargo("container soja") is CargoCategory.CONTAINER

    def test_container_terminal_name(self):
        assert classify_cargo("SOJA", "Santos Brasil") is CargoCategory.CONTAINER

    def test_liquid(self):
        assert classify_cargo("ÓLEO DIESEL", "ALAMOA") is CargoCategory.LIQUID

    def test_bulk(self):
        assert classify_cargo("FARELO DE SOJA", "T-GRÃO") is CargoCategory.BULK

    def test_other(self):
        assert classify_cargo("VEÍCULOS", None, "", None) is CargoCategory.OTHER

    def test_labels(self):
        assert CargoCategory.LIQUID.label == "Liquid (Oil)"
        assert CargoCategory.OTHER.label == "Other"


class TestOperation:

    def test_text_is_kept(self):
        assert clean_operation(" Embarque ") == "Embarque"

    @pytest.mark.parametrize("text", ["123-45", "2025", "", None, "--"])
    def test_numbers_are_dropped(self, text):
        assert clean_operation(text) is None


class TestImo:

    def test_zero_padded(self):
        assert extract_imo(["09876543"]) == "9876543"

    def test_seven_digits(self):
        assert extract_imo(["1234567"]) == "1234567"

    def test_no_run(self):
        assert extract_imo(["99", "MSC ANNA", "12/09"]) is None

    def test_longer_numbers_are_not_split(self):
        assert extract_imo(["98765432", "2025000999"]) is None

    def test_duv_digits_are_rejected(self):
        assert extract_imo(["SHIP", "1234567", "IMO 9876543"], duv="1234567") == "9876543"
        assert extract_imo(["SHIP", "1234567"], duv="1234567") is None

    def test_dedicated_column_preferred(self):
        assert extract_imo(["1111111", "IMO 9876543"], imo_column=1) == "9876543"

    def test_blank_dedicated_column_is_not_widened_to_row(self):
        assert extract_imo(["", "9876543"], imo_column=0) is None

    def test_dedicated_column_past_row_end(self):
        assert extract_imo(["9876543"], imo_column=3) is None
