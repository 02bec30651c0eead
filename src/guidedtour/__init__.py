# src/guidedtour/__init__.py
"""
guidedtour: a guided tour of language features
Small, self-contained demonstrations run in order by an ExampleRunner
"""

__version__ = "0.1.0"

from .enums import Rank, Suit, Weather, compare_rank, rank_from_raw
from .cards import Card, create_deck
from .responses import Result, Failure, Test, ServerResponse, describe_response
from .shapes import (
    Describable,
    HasArea,
    Shape,
    NamedShape,
    Square,
    Circle,
    EquilateralTriangle,
    TriangleAndSquare,
)
from .people import Person, Employee
from .protocols import ExampleProtocol, SimpleClass, SimpleStructure, Number, absolute_value
from .concurrency import fetch_user_id, fetch_username, connect_user, launch, wait_for_background
from .config import TourConfig
from .runner import ExampleRunner, Page, default_runner

__all__ = [
    "ExampleRunner",
    "Page",
    "default_runner",
    "TourConfig",
    "Rank",
    "Suit",
    "Weather",
    "compare_rank",
    "rank_from_raw",
    "Card",
    "create_deck",
    "Result",
    "Failure",
    "Test",
    "ServerResponse",
    "describe_response",
    "Describable",
    "HasArea",
    "Shape",
    "NamedShape",
    "Square",
    "Circle",
    "EquilateralTriangle",
    "TriangleAndSquare",
    "Person",
    "Employee",
    "ExampleProtocol",
    "SimpleClass",
    "SimpleStructure",
    "Number",
    "absolute_value",
    "fetch_user_id",
    "fetch_username",
    "connect_user",
    "launch",
    "wait_for_background",
]
