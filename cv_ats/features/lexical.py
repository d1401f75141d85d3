from __future__ import annotations

import math
import re

_WORD_RE = re.compile(r"\b[\w'-]+\b")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

MAX_EXPERIENCE_YEARS = 40


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, unlike the builtin round()."""
    return int(math.floor(value + 0.5))


def tokenize_words(text: str) -> list[str]:
    return _WORD_RE.findall(text)


def count_words(text: str) -> int:
    return len(tokenize_words(text.strip()))


def count_sentences(text: str) -> int:
    segments = [segment.strip() for segment in _SENTENCE_SPLIT_RE.split(text)]
    return len([segment for segment in segments if segment]) or 1


def estimate_syllables(word: str) -> int:
    lowered = word.lower()
    if len(lowered) <= 3:
        return 1
    return len(_VOWEL_GROUP_RE.findall(lowered)) or 1


def compute_readability(text: str) -> int:
    """Flesch Reading Ease rounded and clamped to 0-100.

    Text without any words scores 0 rather than the formula's intercept, so an
    empty upload lands in the lowest readability bucket.
    """
    words = tokenize_words(text)
    if not words:
        return 0
    sentences = count_sentences(text)
    syllables = sum(estimate_syllables(word) for word in words)
    flesch = 206.835 - 1.015 * (len(words) / sentences) - 84.6 * (syllables / len(words))
    return max(0, min(100, round_half_up(flesch)))


def find_years(text: str) -> list[int]:
    return [int(token) for token in _YEAR_RE.findall(text)]


def estimate_experience_years(text: str) -> int:
    """Coarse span between the earliest and latest year mentioned."""
    years = find_years(text)
    if not years:
        return 0
    if len(years) == 1:
        return 1
    span = max(years) - min(years) + 1
    return max(1, min(MAX_EXPERIENCE_YEARS, span))
