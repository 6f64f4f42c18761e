"""
Core mathematical primitives and domain models.

Pure functions over in-memory sequences; nothing here performs I/O or keeps state.
"""
