"""
Canonical data structures for instants, ranges and planned ticks.
"""
