from typing import Optional


def parse_int(value: Optional[str]) -> Optional[int]:
    """Leading-integer parse ("42 years" -> 42); None when there is no integer prefix."""
    if value is None:
        return None
    text = str(value).strip()
    sign = ""
    if text[:1] in ("+", "-"):
        sign, text = text[0], text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return int(sign + digits) if digits else None
