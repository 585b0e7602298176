"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the analytics core to:
- Trip record storage (CSV files, in-memory batches)
- Output rendering (plain text)
"""
