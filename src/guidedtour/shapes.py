# src/guidedtour/shapes.py
"""
Shape value types.

Each shape is its own type and opts into the ``Describable`` and ``HasArea``
capabilities by providing the matching methods, instead of inheriting them
from a common base class.
"""

import math
from dataclasses import dataclass, field
from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    def simple_description(self) -> str:
        ...


@runtime_checkable
class HasArea(Protocol):
    def area(self) -> float:
        ...


@dataclass
class Shape:
    """A bare shape with a mutable side count."""
    number_of_sides: int = 0
    CLASS_CONSTANT: ClassVar[str] = "test"

    def simple_description(self) -> str:
        return f"A shape with {self.number_of_sides} sides."

    def describe_with(self, adjective: str) -> str:
        return f"A {adjective} shape with {self.number_of_sides} sides."


@dataclass
class NamedShape:
    """A shape that is given a name when it is created."""
    name: str
    number_of_sides: int = 0

    def simple_description(self) -> str:
        return f"A shape with {self.number_of_sides} sides."


@dataclass
class Square:
    side_length: float
    name: str
    number_of_sides: int = field(default=4, init=False)

    def __post_init__(self):
        self.side_length = float(self.side_length)

    def area(self) -> float:
        return self.side_length * self.side_length

    def simple_description(self) -> str:
        return f"A square with sides of length {self.side_length}."


@dataclass
class Circle:
    name: str
    radius: float
    number_of_sides: int = field(default=0, init=False)

    def __post_init__(self):
        self.radius = float(self.radius)

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def simple_description(self) -> str:
        return f"The {self.name} with a radius of {self.radius}"


@dataclass
class EquilateralTriangle:
    side_length: float
    name: str
    number_of_sides: int = field(default=3, init=False)

    def __post_init__(self):
        self.side_length = float(self.side_length)

    @property
    def perimeter(self) -> float:
        return 3.0 * self.side_length

    @perimeter.setter
    def perimeter(self, value: float):
        self.side_length = value / 3.0

    def area(self) -> float:
        return math.sqrt(3) / 4 * self.side_length * self.side_length

    def simple_description(self) -> str:
        return f"An equilateral triangle with sides of length {self.side_length}."


class TriangleAndSquare:
    """Keeps a triangle and a square at the same side length."""

    def __init__(self, size: float, name: str):
        self._square = Square(side_length=size, name=name)
        self._triangle = EquilateralTriangle(side_length=size, name=name)

    @property
    def triangle(self) -> EquilateralTriangle:
        return self._triangle

    @triangle.setter
    def triangle(self, new_value: EquilateralTriangle):
        self._square.side_length = new_value.side_length
        self._triangle = new_value

    @property
    def square(self) -> Square:
        return self._square

    @square.setter
    def square(self, new_value: Square):
        self._triangle.side_length = new_value.side_length
        self._square = new_value
