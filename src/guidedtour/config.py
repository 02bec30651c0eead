# src/guidedtour/config.py
"""
Configuration for running the guided tour.
"""

from dataclasses import dataclass


@dataclass
class TourConfig:
    """Runtime options shared by the runner and the pages."""
    verbose: bool = False  # INFO-level logging when enabled
    show_headers: bool = True  # Print a banner before each page
    server: str = "primary"  # Server name used by the concurrency page

    # Fire-and-forget work started by the pages
    wait_for_background: bool = True  # Join background threads after the last page
    background_timeout: float = 5.0  # Seconds to wait per background thread
