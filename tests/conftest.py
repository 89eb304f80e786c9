"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.game.state import Game, ValidationResult, new_game


@pytest.fixture()
def game() -> Game:
    """A fresh game from the standard starting position."""
    return new_game()


@pytest.fixture()
def play() -> Callable[..., list[ValidationResult]]:
    """Apply ``"e2 e4"``-style moves in order, failing on the first rejection."""

    def _play(target: Game, *moves: str) -> list[ValidationResult]:
        results: list[ValidationResult] = []
        for text in moves:
            from_sq, to_sq = text.split()
            result = target.apply(from_sq, to_sq)
            assert result.is_valid, f"{text} rejected: {result.kind.name} {result.message}"
            results.append(result)
        return results

    return _play
