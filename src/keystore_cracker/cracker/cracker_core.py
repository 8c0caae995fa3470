from __future__ import annotations
import logging
from typing import Iterator, Sequence

from keystore_cracker.config import WORD_SEPARATORS
from keystore_cracker.models.models import DEFAULT_BOUNDS, GrammarBounds, PasswordConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------


def capitalize(text: str) -> str:
    """First character upper-cased, the rest lower-cased."""
    return text[:1].upper() + text[1:].lower()


def title_case(text: str) -> str:
    """Capitalize every whitespace-delimited segment."""
    return " ".join(capitalize(part) for part in text.split())

# ---------------------------------------------------------------------------


def generate_bases(words: Sequence[str], bounds: GrammarBounds = DEFAULT_BOUNDS) -> list[str]:
    """
    Expand a word list into the base tokens of the search.

    Single words within the length bounds are kept as given, lower, upper,
    capitalized and title cased. Every ordered pair of different words is
    joined with each separator; joins within the bounds are kept lower,
    upper and with both words capitalized.

    The result has no duplicates and keeps first-seen order, so the same
    input always gives the same sequence.
    """
    bases: dict[str, None] = {}

    def add(token: str) -> None:
        if bounds.base_length_ok(token):
            bases.setdefault(token, None)

    for word in words:
        if not bounds.base_length_ok(word):
            continue
        add(word)
        add(word.lower())
        add(word.upper())
        add(capitalize(word))
        add(title_case(word))

    for first in words:
        for second in words:
            if first == second:
                continue
            for sep in WORD_SEPARATORS:
                combined = first + sep + second
                if not bounds.base_length_ok(combined):
                    continue
                add(combined.lower())
                add(combined.upper())
                add(capitalize(first) + sep + capitalize(second))

    logger.debug(f"generate_bases: {len(words)} words -> {len(bases)} bases")
    return list(bases)

# ---------------------------------------------------------------------------


def iter_candidates(bases: Sequence[str], config: PasswordConfig) -> Iterator[str]:
    """Yield `base + digits + special` in search order, one at a time."""
    for base in bases:
        for digits in config.digit_patterns:
            for special in config.special_chars:
                yield base + digits + special


def count_candidates(bases: Sequence[str], config: PasswordConfig) -> int:
    return len(bases) * len(config.digit_patterns) * len(config.special_chars)
