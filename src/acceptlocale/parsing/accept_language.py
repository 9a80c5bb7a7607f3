"""Accept-Language preference parsing.

Turns a raw ``Accept-Language`` header value into language tags ordered by
client preference. Parsing is total: any input, including None, empty and
garbage headers, produces a (possibly empty) result and never raises.

Grammar accepted (whitespace-tolerant):
    header  = entry *( "," entry )
    entry   = tag *( ";" param )
    param   = name [ "=" value ]

Rules:
    - Entries without a ``q`` parameter weigh 1.0.
    - The ``q`` name is case-insensitive; other parameters are ignored.
    - A ``q`` value that is not a plain decimal in [0.0, 1.0] gives the
      entry INVALID_QUALITY_WEIGHT (0.0). The entry is kept, so it sorts
      after every positively weighted entry.
    - Entries with an empty tag or a tag containing whitespace or ``=`` are
      dropped.
    - Tags are returned verbatim: no case folding, no subtag expansion.
    - Ordering is a stable sort by descending weight.
    - Headers longer than MAX_HEADER_LENGTH are cut back to the last whole
      entry that fits; a partial entry is never parsed.
    - At most MAX_PREFERENCES kept entries are returned; dropped entries do
      not count towards the limit.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from acceptlocale.constants import (
    DEFAULT_QUALITY_WEIGHT,
    INVALID_QUALITY_WEIGHT,
    MAX_HEADER_LENGTH,
    MAX_PREFERENCES,
    MAX_QUALITY_WEIGHT,
    MIN_QUALITY_WEIGHT,
)
from acceptlocale.locale_utils import is_valid_locale_tag

if TYPE_CHECKING:
    from acceptlocale.types import LanguageTag, OrderedCandidates, QualityWeight

__all__ = [
    "Preference",
    "parse_accept_language",
    "parse_preferences",
    "parse_quality",
]

logger = logging.getLogger(__name__)

# Plain decimal only: rejects exponents, signs, underscores and hex that
# float() would otherwise accept.
_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


@dataclass(frozen=True, slots=True)
class Preference:
    """A language tag paired with its client-stated weight.

    Attributes:
        tag: Language tag exactly as sent by the client
        quality: Weight in [0.0, 1.0], used only for ordering
        position: Zero-based index of the entry in the header
    """

    tag: LanguageTag
    quality: QualityWeight
    position: int


def parse_quality(value: str | None) -> QualityWeight:
    """Parse a ``q`` parameter value.

    Args:
        value: Text after ``q=``, or None when the parameter has no ``=``

    Returns:
        The weight, or INVALID_QUALITY_WEIGHT when the value is not a plain
        decimal within [0.0, 1.0]

    Example:
        >>> parse_quality("0.8")
        0.8
        >>> parse_quality("abc")
        0.0
        >>> parse_quality("1.5")
        0.0
    """
    if value is None:
        return INVALID_QUALITY_WEIGHT

    text = value.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return INVALID_QUALITY_WEIGHT

    quality = float(text)
    if not math.isfinite(quality) or not MIN_QUALITY_WEIGHT <= quality <= MAX_QUALITY_WEIGHT:
        return INVALID_QUALITY_WEIGHT
    return quality


def _entry_quality(params: str) -> QualityWeight:
    """Weight of one entry given everything after its first ``;``."""
    if not params:
        return DEFAULT_QUALITY_WEIGHT

    for param in params.split(";"):
        name, sep, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        # First q parameter wins; later duplicates are ignored.
        return parse_quality(value if sep else None)

    return DEFAULT_QUALITY_WEIGHT


def parse_preferences(header_value: str | None) -> tuple[Preference, ...]:
    """Parse an Accept-Language value into weighted preferences.

    Args:
        header_value: Raw header text (None and "" are treated alike)

    Returns:
        Preferences sorted by descending quality; equal weights keep
        header order

    Example:
        >>> [p.tag for p in parse_preferences("a;q=0.3, b;q=0.9, c")]
        ['c', 'b', 'a']
    """
    if not header_value:
        return ()

    if len(header_value) > MAX_HEADER_LENGTH:
        original_length = len(header_value)
        # Keep whole entries only: the cut must land on a comma.
        header_value = header_value[: MAX_HEADER_LENGTH + 1].rpartition(",")[0]
        logger.debug(
            "Accept-Language truncated from %d to %d characters",
            original_length,
            len(header_value),
        )

    preferences: list[Preference] = []
    for position, entry in enumerate(header_value.split(",")):
        if len(preferences) == MAX_PREFERENCES:
            break
        raw_tag, _, params = entry.partition(";")
        tag = raw_tag.strip()
        if not is_valid_locale_tag(tag):
            continue
        preferences.append(Preference(tag, _entry_quality(params), position))

    # list.sort is stable, including with reverse=True
    preferences.sort(key=lambda preference: preference.quality, reverse=True)
    return tuple(preferences)


def parse_accept_language(header_value: str | None) -> OrderedCandidates:
    """Parse an Accept-Language value into ordered candidate tags.

    Args:
        header_value: Raw header text

    Returns:
        Tags, highest preference first. Empty for empty or malformed input.

    Example:
        >>> parse_accept_language("de-AT, de;q=0.9, en;q=0.5")
        ('de-AT', 'de', 'en')
        >>> parse_accept_language("a;q=0.5, b;q=0.5")
        ('a', 'b')
        >>> parse_accept_language("")
        ()
    """
    return tuple(preference.tag for preference in parse_preferences(header_value))
