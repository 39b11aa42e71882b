from __future__ import annotations

from typing import Iterable, List

import pytest

from gotris.game import Field, TetrominoType


class ScriptedRng:
    """Stands in for random.Random: hands out piece kinds in a fixed order."""

    def __init__(self, kinds: Iterable[TetrominoType]) -> None:
        self.kinds: List[TetrominoType] = list(kinds)
        self.calls = 0

    def choice(self, seq):
        kind = self.kinds[self.calls % len(self.kinds)]
        self.calls += 1
        return kind


@pytest.fixture
def make_field():
    def _make(*kinds: TetrominoType) -> Field:
        return Field(rng=ScriptedRng(kinds or [TetrominoType.PIPE]))

    return _make
