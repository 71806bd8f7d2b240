"""String indexing, validation, and JSON decoding helpers.

Validation helpers return ``bool``; decoding helpers return ``None`` when the
text cannot be decoded. Only :func:`to_dictionary` reports why, through the
package logger.
"""

import json
import re
from typing import Any, Dict, List, Optional, Type

import regex
from pydantic import TypeAdapter, ValidationError

from extkit.core.types import T
from extkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "EMAIL_PATTERN",
    "MOBILE_PATTERN",
    "char_at",
    "decode_objects",
    "is_email",
    "is_mobile_number",
    "is_mobile",
    "to_dictionary",
]

# 6 to 64 characters overall, top-level label of 2 to 56 letters
EMAIL_PATTERN = re.compile(
    r"(?=.{6,64}$)[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,56}"
)
MOBILE_PATTERN = re.compile(r"[0-9]{10}")

_MOBILE_SEPARATORS = str.maketrans("", "", " -/")

# One extended grapheme cluster per match
_GRAPHEME_PATTERN = regex.compile(r"\X")


def char_at(text: str, position: int) -> str:
    """Return the character at zero-based ``position``.

    Characters are user-perceived characters (extended grapheme clusters), so
    a letter followed by a combining accent, or a flag emoji, counts as one.

    Args:
        text: String to index.
        position: Offset from the start of ``text``, in characters.

    Returns:
        The character as a string, which may hold several code points.

    Raises:
        IndexError: If ``position`` is negative or not less than the number
            of characters in ``text``.

    Example:
        >>> char_at("e\\u0301x", 1)
        'x'
    """
    characters = _GRAPHEME_PATTERN.findall(text)
    if position < 0 or position >= len(characters):
        raise IndexError(
            f"Position {position} is out of range for a string of {len(characters)} characters."
        )
    return characters[position]


def decode_objects(text: str, model: Type[T]) -> Optional[List[T]]:
    """Decode a JSON array of ``model`` instances.

    Args:
        text: JSON document whose top level is an array.
        model: Element type. Anything pydantic can validate works, such as a
            ``BaseModel`` subclass, a dataclass or a ``TypedDict``.

    Returns:
        The decoded elements in document order, or ``None`` if the text is
        not valid UTF-8, not valid JSON, or does not match ``model``. Values
        are validated strictly, so ``"1"`` is not accepted for an ``int``.
    """
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError:
        return None

    try:
        return TypeAdapter(List[model]).validate_json(data, strict=True)
    except ValidationError:
        return None


def is_email(text: str) -> bool:
    """Check ``text`` against :data:`EMAIL_PATTERN` as a whole-string match."""
    return EMAIL_PATTERN.fullmatch(text) is not None


def is_mobile_number(text: str) -> bool:
    """Check for exactly ten digits once spaces, hyphens and slashes are removed.

    Example:
        >>> is_mobile_number("123-456-7890")
        True
    """
    stripped = text.translate(_MOBILE_SEPARATORS)
    return MOBILE_PATTERN.fullmatch(stripped) is not None


def is_mobile(number: int) -> bool:
    """Check that the magnitude of ``number`` has exactly ten decimal digits."""
    return len(str(abs(number))) == 10


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant '{name}'")


def to_dictionary(text: str) -> Optional[Dict[str, Any]]:
    """Parse ``text`` as a JSON object.

    Args:
        text: JSON document.

    Returns:
        The parsed object, or ``None`` if parsing fails or the top-level value
        is not an object. Parse errors are logged. ``NaN``, ``Infinity`` and
        ``-Infinity`` are not JSON and count as parse errors.
    """
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError:
        return None

    try:
        value = json.loads(data, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error(f"Could not decode JSON object: {e}")
        return None

    if not isinstance(value, dict):
        return None
    return value
