import re

# Longest accepted spellings: every group separated by a single hyphen or space
ISBN13_MAX_LENGTH = 17
ISBN10_MAX_LENGTH = 13

_SEPARATORS = re.compile(r"[\s-]")


def _normalize(value: str) -> str:
    return _SEPARATORS.sub("", value)


def is_valid_isbn13(value: str) -> bool:
    """Checksum-validate an ISBN-13; hyphens and spaces are ignored."""
    if len(value) > ISBN13_MAX_LENGTH:
        return False
    digits = _normalize(value)
    if len(digits) != 13 or not digits.isdigit():
        return False
    if not digits.startswith(("978", "979")):
        return False
    total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits))
    return total % 10 == 0


def is_valid_isbn10(value: str) -> bool:
    """Checksum-validate an ISBN-10; a trailing X stands for 10."""
    if len(value) > ISBN10_MAX_LENGTH:
        return False
    chars = _normalize(value).upper()
    if len(chars) != 10 or not chars[:9].isdigit():
        return False
    if not (chars[9].isdigit() or chars[9] == "X"):
        return False
    total = sum(
        (10 if c == "X" else int(c)) * weight
        for c, weight in zip(chars, range(10, 0, -1))
    )
    return total % 11 == 0
