# src/guidedtour/protocols.py
"""
Protocol adoption by classes, dataclasses and retrofitted wrappers.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class ExampleProtocol(Protocol):
    simple_description: str
    id: int

    def adjust(self) -> None:
        ...


class SimpleClass:
    """Reference type adopting ExampleProtocol."""

    def __init__(self):
        self.id = 43
        self.simple_description = " A very simple class."
        self.another_property = 69105

    def adjust(self) -> None:
        self.simple_description += "  Now 100% adjusted."


@dataclass
class SimpleStructure:
    """Value type adopting ExampleProtocol; ``id`` is fixed."""
    simple_description: str = "A simple structure"
    id: int = field(default=32, init=False)

    def adjust(self) -> None:
        self.simple_description += " (adjusted)"


class Number:
    """Retrofits ExampleProtocol onto a plain integer."""

    def __init__(self, value: int):
        self.value = value

    @property
    def id(self) -> int:
        return 1

    @property
    def simple_description(self) -> str:
        return f"The number {self.value}"

    def adjust(self) -> None:
        self.value += 42

    def __repr__(self):
        return f"Number({self.value})"


def absolute_value(x: float) -> float:
    """Return the absolute value of a float."""
    return abs(float(x))


def protocol_description(value: ExampleProtocol) -> str:
    """Only members declared by ExampleProtocol are used here."""
    return value.simple_description
