# src/guidedtour/pages.py
"""
The tour pages. Each one prints the results of a short demonstration.
"""

from typing import Optional

from .cards import Card, create_deck
from .concurrency import connect_user, launch
from .config import TourConfig
from .enums import Rank, Suit, Weather, compare_rank, rank_from_raw
from .people import Employee
from .protocols import (
    Number,
    SimpleClass,
    SimpleStructure,
    absolute_value,
    protocol_description,
)
from .responses import Failure, Result, Test, describe_response
from .shapes import (
    Circle,
    EquilateralTriangle,
    HasArea,
    NamedShape,
    Shape,
    Square,
    TriangleAndSquare,
)


def enumerations_and_structures(config: TourConfig):
    """Enumerations with raw values, associated values, and structures."""
    ace = Rank.ACE
    print(f"Rank.ACE has raw value {ace.value}")
    print(f"compare_rank(ace, Rank.ACE) -> {compare_rank(ace, Rank.ACE)}")

    # Failable construction from raw values
    print(f"rank_from_raw(12) -> {rank_from_raw(12).simple_description()}")
    print(f"rank_from_raw(0) -> {rank_from_raw(0)}")

    hearts = Suit.HEARTS
    print(f"{hearts.simple_description()} are {hearts.color()}, "
          f"{Suit.SPADES.simple_description()} are {Suit.SPADES.color()}")

    for response in (
        Result("6:00 am", "8:09 pm"),
        Failure("Out of cheese."),
        Test("Extra case", Rank.QUEEN),
    ):
        print(describe_response(response))

    three_of_spades = Card(rank=Rank.THREE, suit=Suit.SPADES)
    print(three_of_spades.simple_description())

    deck = create_deck()
    print(f"A full deck has {len(deck)} cards, from "
          f"'{deck[0].simple_description()}' to '{deck[-1].simple_description()}'")

    print(f"Weather.SNOW raw value: {Weather.SNOW.value!r}, Weather.RAIN raw value: {Weather.RAIN.value!r}")


def objects_and_classes(config: TourConfig):
    """Shapes with initializers and derived properties, and an Employee."""
    shape = Shape()
    shape.number_of_sides = 700
    print(shape.simple_description())
    print(shape.describe_with("busy"))
    print(NamedShape(name="Round").simple_description())

    square = Square(side_length=5.2, name="my test square")
    circle = Circle(name="Great Circle", radius=5)
    for item in (square, circle):
        print(f"{item.simple_description()} Area: {item.area():.4f}")
    print(f"Both have an area: {all(isinstance(s, HasArea) for s in (square, circle))}")

    triangle = EquilateralTriangle(side_length=3.1, name="a triangle")
    print(f"Triangle perimeter: {triangle.perimeter}")
    triangle.perimeter = 18
    print(f"Side length after setting perimeter to 18: {triangle.side_length}")

    pair = TriangleAndSquare(size=10, name="another test shape")
    print(f"Square side {pair.square.side_length}, triangle side {pair.triangle.side_length}")
    pair.square = Square(side_length=50, name="larger square")
    print(f"After a larger square: triangle side {pair.triangle.side_length}")

    optional_square: Optional[Square] = None
    side = optional_square.side_length if optional_square is not None else None
    print(f"Optional square side length: {side}")

    employee = Employee(name="Jonas", age=33, employee_id="21312323")
    print(employee.greet())
    employee.salary = 350
    print(f"Salary {employee.salary}, tax {employee.tax}")


def protocols_and_extensions(config: TourConfig):
    """One protocol adopted by a class, a dataclass and a wrapped int."""
    a = SimpleClass()
    a.adjust()
    a.id = 23
    print(f"SimpleClass id={a.id}: {a.simple_description!r}")

    b = SimpleStructure()
    b.adjust()
    print(f"SimpleStructure id={b.id}: {b.simple_description!r}")

    number = Number(7)
    print(number.simple_description)
    number.adjust()
    print(f"After adjust: {number.simple_description} (id {number.id})")

    print(f"absolute_value(-7.5) -> {absolute_value(-7.5)}")
    print(f"Through the protocol: {protocol_description(a)!r}")


def concurrency(config: TourConfig):
    """Launch an async chain from synchronous code without waiting on it."""
    print(f"Connecting to {config.server!r} in the background...")
    launch(connect_user(config.server))
    print("Launched; the greeting arrives whenever the task finishes.")
