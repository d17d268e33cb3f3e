"""Typed value model for CBOR data items: integers, strings, arrays, maps, tags, simple values and floats."""

__version__ = "0.1.0"