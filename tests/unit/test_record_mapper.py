from license_reader.common.constants import DEFAULT_BINDINGS, DEFAULT_TAGS
from license_reader.reader.catalog import TagCatalog, default_catalog
from license_reader.reader.record_mapper import build_full_name, map_to_license


def test_full_name_variants():
    assert build_full_name("JOHN", "", "PUBLIC", "") == "PUBLIC, JOHN"
    assert build_full_name("JOHN", "QUINCY", "PUBLIC", "") == "PUBLIC, JOHN QUINCY"
    assert build_full_name("JOHN", "NONE", "PUBLIC", "JR") == "PUBLIC, JOHN JR"
    assert build_full_name("JOHN", "Q", "PUBLIC", "III") == "PUBLIC, JOHN Q III"


def test_map_copies_bound_fields_and_splits_postal_code():
    fields = {
        "DAC": "JOHN",
        "DCS": "PUBLIC",
        "DAQ": "D1234562",
        "DBB": "10172005",
        "DAK": "90223-1234",
        "DAJ": "CA",
        "DCR": "B",
    }
    raw = "@ANSI raw"

    record = map_to_license(fields, raw, default_catalog())

    assert record.full_name == "PUBLIC, JOHN"
    assert record.license_number == "D1234562"
    assert record.date_of_birth == "10172005"
    assert record.postal_code == "90223"
    assert record.postal_code_ext == "1234"
    assert record.state == "CA"
    assert record.restrictions == "B"
    assert record.raw_data == raw


def test_default_bindings_share_dce_between_suffix_and_endorsements():
    record = map_to_license({"DAC": "JOHN", "DCS": "PUBLIC", "DCE": "JR"}, "", default_catalog())
    assert record.suffix == "JR"
    assert record.endorsements == "JR"
    assert record.full_name == "PUBLIC, JOHN JR"


def test_suffix_and_endorsements_bind_independently():
    bindings = dict(DEFAULT_BINDINGS, suffix="DCU", endorsements="DCD")
    catalog = TagCatalog(tags=DEFAULT_TAGS + ("DCU", "DCD"), bindings=bindings)

    record = map_to_license({"DAC": "JOHN", "DCS": "PUBLIC", "DCU": "SR", "DCD": "M", "DCE": "4"}, "", catalog)

    assert record.suffix == "SR"
    assert record.endorsements == "M"
    assert record.full_name == "PUBLIC, JOHN SR"


def test_missing_tags_map_to_empty_fields():
    record = map_to_license({}, "", default_catalog())
    assert record.license_number == ""
    assert record.postal_code == ""
    assert record.postal_code_ext == ""
    assert record.full_name == ","


def test_to_dict_omits_empty_fields():
    record = map_to_license({"DAQ": "X1", "DCS": "DOE"}, "@ANSI DAQX1DCSDOE", default_catalog())
    assert record.to_dict() == {
        "last_name": "DOE",
        "full_name": "DOE,",
        "license_number": "X1",
        "raw_data": "@ANSI DAQX1DCSDOE",
    }
