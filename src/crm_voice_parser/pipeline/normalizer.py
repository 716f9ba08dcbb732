"""
Transcript normalization.

Turns a raw transcript into ordered, lower-cased, sentence-like segments.
Punctuation is stripped except for the characters the extractors need:
`@`, `.` and `-` (emails, decimals, hyphenated phrases), `$` before a digit,
and `,` / `/` between digits (money like $75,000 and dates like 3/15).
"""

import re

from ..errors import TranscriptError

# Group 1 keeps numeric punctuation; everything else outside the allowed set goes.
# ! and ? survive this pass only so they can terminate segments.
_STRIP = re.compile(r'(\$(?=\d)|(?<=\d)[,/](?=\d))|[^\w\s@.\-!?]')

# A run of terminators ends a segment only when followed by whitespace or
# the end of the text, so "techstart.com" and "12.50" stay intact.
_SEGMENT_END = re.compile(r'[.!?]+(?=\s|$)')

_STRAY_TERMINATORS = re.compile(r'[!?]')


def normalize(transcript: str) -> list[str]:
    """
    Split a transcript into normalized segments.

    Args:
        transcript: Raw transcript text

    Returns:
        Ordered list of non-empty, trimmed, lower-cased segments

    Raises:
        TranscriptError: If transcript is not a string
    """
    if not isinstance(transcript, str):
        raise TranscriptError(
            'Transcript must be a string',
            context={'type': type(transcript).__name__},
        )

    text = _STRIP.sub(lambda m: m.group(1) or '', transcript.lower())

    segments = []
    for part in _SEGMENT_END.split(text):
        segment = _STRAY_TERMINATORS.sub('', part).strip()
        if segment:
            segments.append(segment)
    return segments
