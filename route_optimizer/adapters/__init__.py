"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage, loading and path search
- Text rendering
"""
