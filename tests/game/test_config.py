"""Tests for rule parameters."""

import pytest

from chessrules.game.config import DEFAULT_RULES, RulesConfig


class TestRulesConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_RULES.fifty_move_limit == 100
        assert DEFAULT_RULES.repetition_threshold == 3
        assert RulesConfig() == DEFAULT_RULES

    @pytest.mark.parametrize(
        "kwargs",
        [{"fifty_move_limit": 0}, {"repetition_threshold": 0}, {"fifty_move_limit": -5}],
    )
    def test_rejects_non_positive(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            RulesConfig(**kwargs)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_RULES.fifty_move_limit = 10  # type: ignore[misc]
