"""Classic algorithms and data structures: graph search, flows, matching,
dynamic programming, range queries and containers."""

__version__ = "0.1.0"