"""Hypothesis strategies for cldrdecimal property-based testing.

Strategies are organized by domain:

- patterns: decimal format pattern text built from grammar fragments

Usage:
    from tests.strategies import pattern_sources, subpattern_sources
"""

from .patterns import numeric_sources, pattern_sources, subpattern_sources

__all__ = ["numeric_sources", "pattern_sources", "subpattern_sources"]
