import pytest

from keystore_cracker.errors import ConfigurationError
from keystore_cracker.utils.config_loader import (SAMPLE_CONFIG, create_sample_config, load_config,
                                                  parse_markdown)


def test_sample_config():
    config = parse_markdown(SAMPLE_CONFIG)

    assert config.base_words[:3] == ("password", "crypto", "wallet")
    assert len(config.base_words) == 8
    assert config.digit_patterns == ("123", "1234", "2023", "2024", "99", "00", "777", "111", "2025")
    assert config.special_chars == ("!", "@", "#", "$", "%", "&", "*", "_", ".")


def test_notes_and_italic_hints_are_ignored():
    config = parse_markdown(SAMPLE_CONFIG)
    assert not any("Order items" in word for word in config.base_words)
    assert not any(word.startswith("*") for word in config.base_words)


def test_other_headers_and_item_styles():
    text = """
## Words
1. wallet
2. crypto
plainword

## Digits
+ 42
* 7

## Characters
- !
"""
    config = parse_markdown(text)

    assert config.base_words == ("wallet", "crypto", "plainword")
    assert config.digit_patterns == ("42", "7")
    assert config.special_chars == ("!",)


def test_invalid_items_are_skipped():
    text = """
## Base Words
- wallet
- averyveryverylongwordthatgoeson

## Number Combinations
- 123456
- 12a
- 99

## Special Characters
- ab
- x
- ?
"""
    config = parse_markdown(text)

    assert config.base_words == ("wallet",)
    assert config.digit_patterns == ("99",)
    assert config.special_chars == ("?",)


def test_missing_section_is_reported():
    text = """
## Base Words
- wallet

## Special Characters
- !
"""
    with pytest.raises(ConfigurationError, match="digit patterns"):
        parse_markdown(text)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.md")


def test_create_and_load_sample(tmp_path):
    path = create_sample_config(tmp_path / "password_config.md")

    assert path.read_text(encoding="utf-8") == SAMPLE_CONFIG
    assert load_config(path) == parse_markdown(SAMPLE_CONFIG)
