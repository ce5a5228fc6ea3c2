"""US postal code splitting."""

from __future__ import annotations

BASE_POSTAL_CODE_LENGTH = 5


def split_postal_code(raw: str | None) -> tuple[str, str]:
    """Split a ZIP or ZIP+4 value into base code and extension.

    ``12345-6789`` and ``123456789`` both give ``("12345", "6789")``. Anything
    five characters or shorter, or longer values without a hyphen that are
    not exactly nine characters, are returned whole with an empty extension.
    """
    if not raw:
        return "", ""
    if len(raw) > BASE_POSTAL_CODE_LENGTH and "-" in raw:
        base, ext = raw.split("-", 1)
        return base, ext
    if len(raw) == 9:
        return raw[:BASE_POSTAL_CODE_LENGTH], raw[BASE_POSTAL_CODE_LENGTH:]
    return raw, ""
