"""TRON addresses, ABI encoding, YAML settings and parsing of operation input."""

__version__ = "0.1.0"