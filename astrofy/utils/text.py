import re

_WHITESPACE_REGEX = re.compile(r"\s+")
# ASCII only, non-latin letters are dropped rather than transliterated
_NON_SLUG_CHARS_REGEX = re.compile(r"[^\w-]", re.ASCII)


def slugify(text: str) -> str:
    value = _WHITESPACE_REGEX.sub("-", text.strip().lower())
    value = _NON_SLUG_CHARS_REGEX.sub("", value)
    return value.strip("-")
