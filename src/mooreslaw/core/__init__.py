"""
Core mathematical primitives and domain models.

This package contains the pure growth formulas and the typed models built on
top of them. Nothing here performs I/O.
"""
