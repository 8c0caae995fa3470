"""
Load the password configuration from a markdown file.

The file holds three `## ` sections. A header mentioning "base" or "word"
lists base words, "number" or "digit" lists digit patterns and "special" or
"character" lists special characters; other sections are ignored. Items are
bullet lines (`- item`, `* item`, `+ item`, `1. item`) or plain lines.
"""

import re
from logging import getLogger
from pathlib import Path
from typing import Callable, Generator

from keystore_cracker.config import MAX_WORD_LENGTH
from keystore_cracker.errors import ConfigurationError
from keystore_cracker.models.models import DEFAULT_BOUNDS, GrammarBounds, PasswordConfig

logger = getLogger(__name__)

SECTION_SPLIT = re.compile(r"(?m)^(?=## )")
BULLET_ITEM = re.compile(r"^(?:[-*+]|\d+\.)\s+(.+)")

BASE_WORDS = "base words"
DIGIT_PATTERNS = "digit patterns"
SPECIAL_CHARS = "special characters"

SAMPLE_CONFIG = """\
# Keystore Password Recovery Configuration

## Base Words
*List your commonly used base words or phrases (5-12 characters)*

- password
- crypto
- wallet
- ethereum
- mytoken
- secure
- private
- blockchain

## Number Combinations
*List your commonly used number patterns (1-5 digits)*

- 123
- 1234
- 2023
- 2024
- 99
- 00
- 777
- 111
- 2025

## Special Characters
*List your commonly used special characters (single character)*

- !
- @
- #
- $
- %
- &
- *
- _
- .

## Notes
- Order items by likelihood for faster recovery
- Base words will be tried with different capitalizations
- Words can be combined to reach the 5-12 character requirement
"""


def section_kind(header: str) -> str | None:
    """Which list a `## ` header feeds, None for sections to skip."""
    header = header.lower()
    if "base" in header or "word" in header:
        return BASE_WORDS
    if "number" in header or "digit" in header:
        return DIGIT_PATTERNS
    if "special" in header or "character" in header:
        return SPECIAL_CHARS
    return None


def section_items(lines: list[str]) -> Generator[str, None, None]:
    """Yield the items listed in the body of a section."""
    for line in lines:
        line = line.strip()
        match = BULLET_ITEM.match(line)
        if match:
            yield match.group(1).strip()
        elif line and not line.startswith("#") and not line.startswith("*"):
            yield line


def item_checks(bounds: GrammarBounds) -> dict[str, Callable[[str], bool]]:
    digits = re.compile(rf"\d{{{bounds.min_digits},{bounds.max_digits}}}")
    return {
        BASE_WORDS: lambda item: 1 <= len(item) <= MAX_WORD_LENGTH,
        DIGIT_PATTERNS: lambda item: digits.fullmatch(item) is not None,
        SPECIAL_CHARS: lambda item: (len(item) == bounds.special_length
                                     and not any(ch.isalnum() for ch in item)),
    }


def parse_markdown(text: str, bounds: GrammarBounds = DEFAULT_BOUNDS) -> PasswordConfig:
    """Build a PasswordConfig from markdown text."""
    lists: dict[str, list[str]] = {BASE_WORDS: [], DIGIT_PATTERNS: [], SPECIAL_CHARS: []}
    checks = item_checks(bounds)

    for section in SECTION_SPLIT.split(text):
        if not section.strip():
            continue
        header, *body = section.splitlines()
        kind = section_kind(header) if header.startswith("## ") else None
        if kind is None:
            continue

        for item in section_items(body):
            if checks[kind](item):
                lists[kind].append(item)
            else:
                logger.warning(f"Skipping invalid entry in {kind}: {item!r}")

    missing = [kind for kind, items in lists.items() if not items]
    if missing:
        raise ConfigurationError(
            f"Configuration is incomplete, please add: {', '.join(missing)}")

    return PasswordConfig(
        base_words=lists[BASE_WORDS],
        digit_patterns=lists[DIGIT_PATTERNS],
        special_chars=lists[SPECIAL_CHARS],
    )


def load_config(file_path: Path, bounds: GrammarBounds = DEFAULT_BOUNDS) -> PasswordConfig:
    """Read and parse a markdown configuration file."""
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    config = parse_markdown(file_path.read_text(encoding="utf-8"), bounds)
    logger.info(f"Loaded {config} from {file_path}")
    return config


def create_sample_config(file_path: Path) -> Path:
    """Write the sample configuration to `file_path`."""
    file_path = Path(file_path)
    file_path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    logger.info(f"Sample configuration created: {file_path}")
    return file_path
