# src/guidedtour/runner.py
"""
ExampleRunner: runs the tour pages in order.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from . import pages
from .concurrency import wait_for_background
from .config import TourConfig

logger = logging.getLogger(__name__)

# Package-wide logger, so the verbose flag covers every module
package_logger = logging.getLogger(__package__)


@dataclass
class Page:
    """A registered demonstration."""
    name: str
    title: str
    run: Callable[[TourConfig], None]


class ExampleRunner:
    """Executes registered pages in registration order."""

    def __init__(self, config: Optional[TourConfig] = None):
        self.config = config or TourConfig()
        self._pages: List[Page] = []

        if self.config.verbose:
            package_logger.setLevel(logging.INFO)
        else:
            package_logger.setLevel(logging.WARNING)

    def register(self, name: str, title: str, func: Callable[[TourConfig], None]) -> Page:
        """Append a page to the tour."""
        if any(p.name == name for p in self._pages):
            raise ValueError(f"Page '{name}' is already registered")
        page = Page(name=name, title=title, run=func)
        self._pages.append(page)
        return page

    @property
    def page_names(self) -> List[str]:
        return [p.name for p in self._pages]

    @property
    def pages(self) -> List[Page]:
        return list(self._pages)

    def select(self, names: Optional[Iterable[str]] = None) -> List[Page]:
        """Return the requested pages in the requested order (all if None)."""
        if names is None:
            return self.pages

        by_name = {p.name: p for p in self._pages}
        selected = []
        for name in names:
            if name not in by_name:
                known = ", ".join(self.page_names)
                raise ValueError(f"Unknown page '{name}' (known pages: {known})")
            selected.append(by_name[name])
        return selected

    def run(self, names: Optional[Iterable[str]] = None) -> List[str]:
        """Run the selected pages and return the names that ran."""
        selected = self.select(names)
        completed = []

        for index, page in enumerate(selected, start=1):
            logger.info(f"Running page {index}/{len(selected)}: {page.name}")
            if self.config.show_headers:
                print(f"\n=== {page.title} ===")
            page.run(self.config)
            completed.append(page.name)

        if self.config.wait_for_background:
            joined = wait_for_background(self.config.background_timeout)
            if joined:
                logger.info(f"Joined {joined} background task(s)")

        return completed


def default_runner(config: Optional[TourConfig] = None) -> ExampleRunner:
    """Build a runner with the standard tour pages."""
    runner = ExampleRunner(config)
    runner.register("enumerations", "Enumerations and Structures", pages.enumerations_and_structures)
    runner.register("classes", "Objects and Classes", pages.objects_and_classes)
    runner.register("protocols", "Protocols and Extensions", pages.protocols_and_extensions)
    runner.register("concurrency", "Concurrency", pages.concurrency)
    return runner
