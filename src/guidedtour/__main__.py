# src/guidedtour/__main__.py
"""Allows ``python -m guidedtour``."""

import sys

from .cli import main

sys.exit(main())
