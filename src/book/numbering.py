from __future__ import annotations

from typing import List, Tuple

from src.models.document import ROOT_LABEL


class NumberingCounter:
    """Per-depth counters producing hierarchical labels such as ``2.1.``."""

    def __init__(self, size: int = 8) -> None:
        if size < 2:
            raise ValueError("NumberingCounter needs at least two slots")
        self._counters: List[int] = [0] * size

    @property
    def max_depth(self) -> int:
        return len(self._counters) - 1

    def advance(self, depth: int) -> str:
        if depth < 1 or depth > self.max_depth:
            raise ValueError(f"Heading depth {depth} is outside 1..{self.max_depth}")
        if depth == 1:
            return ROOT_LABEL

        self._counters[depth] += 1
        for index in range(depth + 1, len(self._counters)):
            self._counters[index] = 0

        parts = [str(count) for count in self._counters[1 : depth + 1] if count > 0]
        return ".".join(parts) + "."

    def reset(self) -> None:
        self._counters = [0] * len(self._counters)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self._counters)


__all__ = ["NumberingCounter"]
