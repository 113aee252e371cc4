"""Dependency cycle detection engine.

Finds elementary cycles in project and class dependency graphs and ranks
the nodes involved as hotspots and breakpoints.
"""

__version__ = "1.0.0"
