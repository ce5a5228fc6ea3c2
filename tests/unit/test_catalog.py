import pytest

from license_reader.common.constants import DEFAULT_TAGS
from license_reader.common.errors import ConfigError
from license_reader.reader.catalog import TagCatalog, default_catalog


def test_default_catalog_keeps_reference_order():
    catalog = default_catalog()
    assert catalog.tags == DEFAULT_TAGS
    assert catalog.tags[:3] == ("DAC", "DAD", "DCS")
    assert catalog.start_sentinel == "@"
    assert catalog.header_length == 5


def test_pattern_matches_only_catalog_tags():
    catalog = TagCatalog(tags=("DAQ", "DCS"), bindings={})
    assert [m.group(0) for m in catalog.pattern.finditer("xxDAQ1DCU2DCS3")] == ["DAQ", "DCS"]


def test_bindings_are_read_only():
    catalog = default_catalog()
    with pytest.raises(TypeError):
        catalog.bindings["suffix"] = "DCU"


def test_tag_for_unbound_field():
    catalog = TagCatalog(tags=("DAQ",), bindings={"license_number": "DAQ"})
    assert catalog.tag_for("license_number") == "DAQ"
    assert catalog.tag_for("suffix") is None


@pytest.mark.parametrize(
    "tags,bindings",
    [
        ((), {}),
        (("DAQ", "daq"), {}),
        (("DAQ", "DAQ"), {}),
        (("DAQ",), {"suffix": "DCU"}),
        (("DAQ",), {"raw_data": "DAQ"}),
    ],
)
def test_invalid_catalog_rejected(tags, bindings):
    with pytest.raises(ConfigError):
        TagCatalog(tags=tags, bindings=bindings)
