"""String helpers with safe character access."""

import random
import re
import string
from collections.abc import Sequence
from urllib.parse import quote, unquote, urlsplit

from hubble.models import NOTHING, IndexRange, Option, Some

from .sequences import element_at, slice_safe

ALPHANUMERICS = string.ascii_letters + string.digits

LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
    "mollit anim id est laborum."
)

_EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_WORD_SEPARATORS = re.compile(r"[\s" + re.escape(string.punctuation) + r"]+")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# RFC 3986 unreserved, reserved and percent characters
_URL_CHARACTERS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
# Characters kept as-is by url_encoded, besides letters, digits and "_.-~"
_URL_SAFE = "!$&'()*+,:;=[]"


def char_at(text: str, index: int) -> Option[str]:
    """Character at ``index``, or NOTHING when out of range."""
    return element_at(text, index)


def substring(text: str, index_range: IndexRange | range) -> Option[str]:
    """Substring covered by ``index_range``; see ``slice_safe`` for the rules."""
    return slice_safe(text, index_range)


def first_char(text: str) -> Option[str]:
    return char_at(text, 0)


def last_char(text: str) -> Option[str]:
    return char_at(text, len(text) - 1)


def contains(text: str, sub: str, case_sensitive: bool = True) -> bool:
    if not case_sensitive:
        return sub.casefold() in text.casefold()
    return sub in text


def starts_with(text: str, prefix: str, case_sensitive: bool = True) -> bool:
    if not case_sensitive:
        return text.lower().startswith(prefix.lower())
    return text.startswith(prefix)


def ends_with(text: str, suffix: str, case_sensitive: bool = True) -> bool:
    if not case_sensitive:
        return text.lower().endswith(suffix.lower())
    return text.endswith(suffix)


def count_of(text: str, sub: str, case_sensitive: bool = True) -> int:
    """Non-overlapping occurrences of ``sub`` in ``text``."""
    if not sub:
        return 0
    if not case_sensitive:
        return text.lower().count(sub.lower())
    return text.count(sub)


def is_email(text: str) -> bool:
    """True if ``text`` contains something shaped like an email address."""
    return _EMAIL_PATTERN.search(text) is not None


def is_numeric(text: str) -> bool:
    """True if ``text`` has at least one digit and no letters."""
    has_letters = any(ch.isalpha() for ch in text)
    has_digits = any(ch.isdigit() for ch in text)
    return has_digits and not has_letters


def matches(text: str, pattern: str) -> bool:
    """True if the regular expression ``pattern`` matches anywhere in ``text``."""
    return re.search(pattern, text) is not None


def parse_int(text: str) -> Option[int]:
    """Integer value of ``text``: optional sign and ASCII digits only, no spaces.

    Example:
        >>> parse_int("101")
        Some(value=101)
        >>> parse_int("1_000")
        NOTHING
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return NOTHING
    return Some(int(text))


def is_valid_url(text: str) -> bool:
    """True if ``text`` is made only of characters allowed in a URL.

    A scheme is not required; see ``is_valid_schemed_url``.
    """
    if _URL_CHARACTERS.fullmatch(text) is None:
        return False
    try:
        urlsplit(text)
    except ValueError:
        return False
    return True


def _url_scheme(text: str) -> str | None:
    if not is_valid_url(text):
        return None
    return urlsplit(text).scheme


def is_valid_schemed_url(text: str) -> bool:
    return bool(_url_scheme(text))


def is_valid_https_url(text: str) -> bool:
    return _url_scheme(text) == "https"


def is_valid_file_url(text: str) -> bool:
    return _url_scheme(text) == "file"


def url_encoded(text: str) -> str:
    """Percent-encode ``text`` for use in a URL.

    Example:
        >>> url_encoded("it's easy to encode strings")
        "it's%20easy%20to%20encode%20strings"
    """
    return quote(text, safe=_URL_SAFE)


def url_decoded(text: str) -> str:
    """Undo percent-encoding; malformed escapes are left as they are."""
    return unquote(text)


def is_number_char(char: str) -> bool:
    """True if ``char`` is a single ASCII digit."""
    return char_to_int(char).is_some


def is_letter(char: str) -> bool:
    return len(char) == 1 and char.isalpha()


def is_uppercased(char: str) -> bool:
    """True if upper-casing leaves ``char`` unchanged (so digits count too)."""
    return char == char.upper()


def is_lowercased(char: str) -> bool:
    """True if lower-casing leaves ``char`` unchanged (so digits count too)."""
    return char == char.lower()


def is_white_space(char: str) -> bool:
    """True only for the space character."""
    return char == " "


def char_to_int(char: str) -> Option[int]:
    """Digit value of a single character."""
    if len(char) != 1:
        return NOTHING
    return parse_int(char)


def trimmed(text: str) -> str:
    return text.strip()


def truncated(text: str, length: int, trailing: str | None = "...") -> str:
    """Cut ``text`` to ``length`` characters and append ``trailing``.

    Returned unchanged when ``length`` is not in ``[1, len(text))``.
    """
    if not 1 <= length < len(text):
        return text
    return text[:length] + (trailing or "")


def to_slug(text: str) -> str:
    """Lowercase, dash-separated form keeping only alphanumerics, '-' and '&'.

    Example:
        >>> to_slug("  Python is amazing ")
        'python-is-amazing'
    """
    with_dashes = text.lower().replace(" ", "-")
    filtered = "".join(ch for ch in with_dashes if ch in "-&" or ch.isalnum())
    return filtered.strip("-").replace("--", "-")


def words(text: str) -> list[str]:
    """Words split on whitespace and punctuation."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def word_count(text: str) -> int:
    return len(words(text))


def camelized(text: str) -> str:
    """camelCase form of a space-separated phrase.

    Example:
        >>> camelized("sOme vAriable naMe")
        'someVariableName'
    """
    source = text.lower()
    if not source:
        return source
    if " " in source:
        connected = source.title().replace(" ", "").replace("\n", "")
        return source[0] + connected[1:]
    return source


def has_unique_characters(text: str) -> bool:
    """True if no character repeats. False for an empty string."""
    return bool(text) and len(set(text)) == len(text)


def random_string(length: int, rng: random.Random | None = None, alphabet: Sequence[str] = ALPHANUMERICS) -> str:
    """Random string of ``length`` characters from ``alphabet``; "" if ``length <= 0``."""
    if length <= 0:
        return ""
    rng = rng or random
    return "".join(alphabet[rng.randrange(len(alphabet))] for _ in range(length))


def lorem_ipsum(length: int = 445) -> str:
    """Lorem ipsum text cut to at most ``length`` characters."""
    if length <= 0:
        return ""
    return LOREM_IPSUM[:length]
