"""
guidedtour examples package.

This package contains scripts showing how to drive the tour from code.
These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Run the whole tour, or a few pages
- custom_page_example.py: Register a page of your own
"""
