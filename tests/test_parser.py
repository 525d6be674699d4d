from app.services.nrc_conversion.parser import parse_record, parse_townships, split_fields

from tests.helpers import HEADER, make_line


def test_split_fields_on_tabs_and_space_runs():
    assert split_fields("a\tb\t\tc") == ["a", "b", "c"]
    assert split_fields("Mon  မွန်   11") == ["Mon", "မွန်", "11"]
    # a single space is part of the field
    assert split_fields("Kachin (Special)\tx") == ["Kachin (Special)", "x"]


def test_parse_record_uses_positions_and_ignores_pattern_column():
    record = parse_record(" Shan \tရှမ်း\t13\t Taunggyi\tTaKaNa\tတောင်ကြီး \textra")
    assert record.region_name == "Shan"
    assert record.region_name_local == "ရှမ်း"
    assert record.code == "13"
    assert record.township == "Taunggyi"
    assert record.township_local == "တောင်ကြီး"


def test_parse_record_rejects_short_lines():
    assert parse_record("Shan\tရှမ်း\t13\tTaunggyi\tTaKaNa") is None


def test_header_is_dropped_whatever_it_contains():
    text = "\n".join([make_line("Kayin", "Hpa-an", "ဘားအံ"), make_line("Shan", "Lashio", "လားရှိုး")])
    result = parse_townships(text)
    assert list(result.regions) == ["Shan"]


def test_blank_lines_are_removed_before_header():
    text = "\n   \n" + HEADER + "\n\n" + make_line("Shan", "Lashio", "လားရှိုး") + "\n\t\n"
    result = parse_townships(text)
    assert result.lines_read == 1
    assert result.township_count == 1


def test_short_lines_are_skipped_and_recorded():
    text = "\n".join([
        HEADER,
        make_line("Shan", "Taunggyi", "တောင်ကြီး"),
        "Shan\tရှမ်း\t13",
        make_line("Shan", "Lashio", "လားရှိုး"),
    ])
    result = parse_townships(text)
    assert result.lines_read == 3
    assert result.records_accepted == 2
    assert result.skipped_lines == [2]
    assert [p.township for p in result.regions["Shan"].townships] == ["Taunggyi", "Lashio"]


def test_regions_keep_first_seen_order_and_first_code():
    text = "\n".join([
        HEADER,
        make_line("Shan", "Taunggyi", "တောင်ကြီး", code="13"),
        make_line("Mon", "Mawlamyine", "မော်လမြိုင်", region_local="မွန်", code="11"),
        make_line("Shan", "Lashio", "လားရှိုး", region_local="other", code="99"),
    ])
    result = parse_townships(text)

    assert list(result.regions) == ["Shan", "Mon"]
    shan = result.regions["Shan"]
    assert shan.code == "13"
    assert shan.region_name_local == "ရှမ်း"
    assert [p.township_local for p in shan.townships] == ["တောင်ကြီး", "လားရှိုး"]


def test_region_keys_are_case_sensitive():
    text = "\n".join([
        HEADER,
        make_line("Shan", "Taunggyi", "တောင်ကြီး"),
        make_line("shan", "Lashio", "လားရှိုး"),
    ])
    assert list(parse_townships(text).regions) == ["Shan", "shan"]
