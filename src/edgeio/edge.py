"""Timestamped edge of a digital signal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from edgeio.exceptions import EdgeContractError

__all__ = ["Edge"]


def _require_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a valid timestamp or level.
    if isinstance(value, bool) or not isinstance(value, int):
        raise EdgeContractError(
            f"Edge {name} must be int, got {type(value).__name__}: {value!r}"
        )


@dataclass(frozen=True, slots=True, repr=False)
class Edge:
    """One observed transition of a signal.

    Edges are ordered by ``time_micros`` only. Two edges with the same
    timestamp compare equal in ordering even if their signals differ,
    while ``==`` still compares both fields.
    """

    time_micros: int
    """Time in micros from the start time."""
    signal: int
    """The measurement, 1 for a rising edge, 0 otherwise."""

    def __post_init__(self) -> None:
        _require_int("time_micros", self.time_micros)
        _require_int("signal", self.signal)

    def diff(self, other: Edge) -> int:
        """Time from other edge to this one, negative if other is later."""
        _check_operand(other)
        return self.time_micros - other.time_micros

    def sign(self) -> int:
        """Signal normalized to 1 (high) or 0 (low)."""
        return 1 if self.signal > 0 else 0

    def same_sign(self, other: Edge) -> bool:
        _check_operand(other)
        return self.sign() == other.sign()

    def compare_to(self, other: Edge) -> int:
        """Return -1, 0 or 1 comparing timestamps."""
        _check_operand(other)
        if self.time_micros < other.time_micros:
            return -1
        if self.time_micros > other.time_micros:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.time_micros < other.time_micros

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.time_micros <= other.time_micros

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.time_micros > other.time_micros

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.time_micros >= other.time_micros

    def __repr__(self) -> str:
        return f"Edge({self.time_micros}, {self.signal})"


def _check_operand(other: Any) -> None:
    if not isinstance(other, Edge):
        raise EdgeContractError(
            f"Expected Edge operand, got {type(other).__name__}: {other!r}"
        )
