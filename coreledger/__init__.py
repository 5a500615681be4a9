"""Ledger building blocks: fees, transaction statistics, errors, security helpers, constants, configuration, rate limiting and a Flask HTTP API."""

__version__ = "0.1.0"