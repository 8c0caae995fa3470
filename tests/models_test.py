from datetime import timedelta

import pytest
from pydantic import ValidationError

from keystore_cracker.models.models import (GrammarBounds, PasswordConfig, ProgressSnapshot,
                                            RecoveryResult)


def test_config_lists_are_immutable():
    config = PasswordConfig(base_words=["wallet"], digit_patterns=["1"], special_chars=["!"])

    assert config.base_words == ("wallet",)
    assert config.is_valid()
    assert str(config) == "PasswordConfig(base_words=1, digit_patterns=1, special_chars=1)"
    with pytest.raises(ValidationError):
        config.base_words = ("other",)


def test_config_error_names_the_empty_list():
    with pytest.raises(ValidationError, match="digit_patterns cannot be empty"):
        PasswordConfig(base_words=["wallet"], digit_patterns=[], special_chars=["!"])


def test_default_bounds():
    bounds = GrammarBounds()
    assert (bounds.min_base_length, bounds.max_base_length) == (5, 12)
    assert (bounds.min_digits, bounds.max_digits) == (1, 5)
    assert bounds.base_length_ok("abcde")
    assert not bounds.base_length_ok("abcd")
    assert not bounds.base_length_ok("a" * 13)


@pytest.mark.parametrize("kwargs", [
    {"min_base_length": 0},
    {"min_base_length": 8, "max_base_length": 6},
    {"min_digits": 3, "max_digits": 2},
    {"special_length": 0},
])
def test_invalid_bounds(kwargs):
    with pytest.raises(ValidationError):
        GrammarBounds(**kwargs)


def test_result_helpers():
    result = RecoveryResult(found=True, password="Wallet1!", attempts=1234,
                            elapsed=timedelta(seconds=2.5))

    assert result.elapsed_seconds == 2.5
    assert str(result) == "RecoveryResult(found=True, attempts=1,234, time=2.50s)"


def test_progress_percent():
    assert ProgressSnapshot(attempts=25, total=100, elapsed_seconds=1.0, rate=25.0).percent == 25.0
    assert ProgressSnapshot(attempts=0, total=0, elapsed_seconds=0.0, rate=0.0).percent == 0.0
