"""
Chrono Axis - Time Axis Layout Engine

Computes how a continuous range of time instants is laid out along a linear
axis of fixed pixel length: instant/pixel mapping in both directions and a
human-friendly set of calendar-aligned ticks with their labels.
"""

__version__ = "0.1.0"
__author__ = "Chrono Axis Team"
