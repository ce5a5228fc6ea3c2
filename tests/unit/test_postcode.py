from license_reader.common.postcode import split_postal_code


def test_split_nine_digit_zip():
    assert split_postal_code("123456789") == ("12345", "6789")


def test_split_hyphenated_zip():
    assert split_postal_code("12345-6789") == ("12345", "6789")


def test_five_digit_zip_has_no_extension():
    assert split_postal_code("12345") == ("12345", "")


def test_empty_and_none():
    assert split_postal_code("") == ("", "")
    assert split_postal_code(None) == ("", "")


def test_long_value_without_hyphen_is_kept_whole():
    assert split_postal_code("1234567") == ("1234567", "")
    assert split_postal_code("12345678901") == ("12345678901", "")


def test_padded_canadian_style_value_splits_on_first_hyphen():
    assert split_postal_code("K1A-0B1-X") == ("K1A", "0B1-X")
