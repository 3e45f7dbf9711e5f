"""eazypm - easy & safe dependency reinstaller."""

__version__ = "1.0.0"
