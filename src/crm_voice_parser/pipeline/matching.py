"""
Shared regex helpers for the rule-based extractors.

Every extractor works the same way: an ordered list of compiled patterns per
field, tried in priority order against each segment, first match wins.
"""

import re
from collections.abc import Sequence

# Connector words and pronouns that never start (or continue) a name/company.
STOP_WORDS = (
    'a', 'about', 'after', 'again', 'all', 'also', 'an', 'and', 'any', 'are', 'at',
    'back', 'before', 'but', 'by', 'for', 'from', 'he', 'her', 'here', 'him', 'his',
    'i', 'in', 'is', 'it', 'its', 'just', 'last', 'least', 'me', 'my', 'not', 'of',
    'on', 'or', 'our', 'over', 'regarding', 'she', 'so', 'some', 'that', 'the',
    'their', 'them', 'there', 'they', 'this', 'to', 'today', 'tomorrow', 'up',
    'us', 'via', 'was', 'we', 'who', 'will', 'with', 'yesterday', 'you', 'your',
)

_STOP = r'(?!(?:%s)\b)' % '|'.join(sorted(STOP_WORDS, key=len, reverse=True))

# One or two words, e.g. "sarah" or "sarah johnson"
NAME = rf'{_STOP}([a-z]+\b(?:\s+{_STOP}[a-z]+\b)?)'

# One to three words, e.g. "acme" or "techstart inc"
COMPANY = rf'{_STOP}([a-z][a-z0-9]*\b(?:\s+{_STOP}[a-z0-9]+\b){{0,2}})'

MONTHS = (
    r'(?:january|february|march|april|may|june|july|august|september|october|'
    r'november|december|jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|nov|dec)'
)
WEEKDAYS = r'(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)'

# "march 15", "march 15th 2026" (commas are stripped by the normalizer)
MONTH_DAY = rf'({MONTHS}\s+\d{{1,2}}(?:st|nd|rd|th)?(?:\s+\d{{4}})?)\b'
SLASH_DATE = r'(\d{1,2}/\d{1,2}(?:/\d{2,4})?)\b'


def phrase_pattern(phrases: Sequence[str], stems: bool = False) -> re.Pattern[str]:
    """
    Compile keyword phrases into one word-bounded alternation.

    Longer phrases are tried first so "key points" is consumed whole rather
    than leaving a dangling "s". A space inside a phrase also matches a
    hyphen, so "follow up" matches "follow-up".

    With stems=True only the start of a word is bounded: "confirm" also
    matches "confirmed" and "confirming", but never "reconfirm".
    """
    alternatives = sorted(
        (re.escape(phrase).replace(r'\ ', r'[\s-]+') for phrase in phrases),
        key=len,
        reverse=True,
    )
    tail = r'\w*' if stems else r'\b'
    return re.compile(r'\b(?:%s)%s' % ('|'.join(alternatives), tail), re.IGNORECASE)


def first_group(patterns: Sequence[re.Pattern[str]], segment: str) -> str | None:
    """Return group 1 of the first pattern (in priority order) that matches."""
    for pattern in patterns:
        match = pattern.search(segment)
        if match:
            return match.group(1)
    return None


def title_case(value: str) -> str:
    """Upper-case the first letter of every word; any whitespace run becomes one space."""
    return ' '.join(word[:1].upper() + word[1:] for word in value.split())


def capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def collapse_whitespace(value: str) -> str:
    return ' '.join(value.split())
