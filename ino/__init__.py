"""Route patterns, route grouping, validators and transaction scopes."""

__version__ = "0.1.0"