"""Reading analytics derived from raw markdown."""

from __future__ import annotations

WORDS_PER_MINUTE = 200


def reading_analytics(content: str) -> tuple[int, int]:
    """Return ``(word_count, reading_time_minutes)`` for *content*.

    Words are whitespace-separated tokens. Reading time rounds up, so any
    non-empty text takes at least one minute.
    """
    word_count = len(content.split())
    reading_time = (word_count + WORDS_PER_MINUTE - 1) // WORDS_PER_MINUTE
    return word_count, reading_time
