from __future__ import annotations

import re

COUNTRY_CODE = "54"
LOCAL_DIGITS = 10  # 2 area + 8 subscriber

_NON_DIGITS = re.compile(r"\D+")
_STRICT_PHONE = re.compile(r"^\+54\s\d{2}\s\d{4}-\d{4}$")


def format_phone_ar(text: str | None) -> str:
    """Format typed input as "+54 11 1234-5678", keeping partial input usable.

    Safe to call on already-formatted values; the result does not change.
    """
    digits = _NON_DIGITS.sub("", str(text or ""))
    rest = digits[len(COUNTRY_CODE):] if digits.startswith(COUNTRY_CODE) else digits
    rest = rest[:LOCAL_DIGITS]

    area = rest[0:2]
    main1 = rest[2:6]
    main2 = rest[6:10]

    out = f"+{COUNTRY_CODE}"
    if area:
        out += " " + area
    if main1:
        out += " " + main1
    if main2:
        out += "-" + main2
    return out


def is_valid_phone_ar(text: str | None) -> bool:
    return bool(text) and _STRICT_PHONE.match(text) is not None
