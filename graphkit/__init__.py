"""Graph representations, traversal, Euler and Hamilton cycles, spanning trees and shortest paths."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "directed",
    "euler",
    "hamilton",
    "shortest",
    "spanning",
    "traversal",
    "undirected",
]