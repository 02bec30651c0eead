# src/guidedtour/responses.py
"""
Server responses as a tagged union of payload-carrying variants.

A response is exactly one of ``Result``, ``Failure`` or ``Test``. The
``Failure`` variant is an ordinary value: it is never raised.
"""

from dataclasses import dataclass
from typing import Union

from .enums import Rank


@dataclass(frozen=True)
class Result:
    """Sunrise and sunset times returned by the server."""
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class Failure:
    """Description of what went wrong."""
    message: str


@dataclass(frozen=True)
class Test:
    """Extra case carrying a label and a rank."""
    __test__ = False  # keep pytest from collecting this

    value: str
    rank: Rank


ServerResponse = Union[Result, Failure, Test]


def describe_response(response: ServerResponse) -> str:
    """Match a response against each variant and extract its payload."""
    if isinstance(response, Result):
        return f"Sunrise is at {response.sunrise} and sunset is at {response.sunset}."
    if isinstance(response, Failure):
        return f"Failure...  {response.message}"
    if isinstance(response, Test):
        return f"{response.value} and {response.rank.name.lower()}"
    raise TypeError(f"Not a server response: {response!r}")
