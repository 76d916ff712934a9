"""Test suite for fallible.

Test structure:
- unit/: Unit and property tests for the result algebra, its bridging and
  collection helpers, and the logging/config stack it carries.
"""
