"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the CPMM calculator
that are independent of any presentation layer.
"""
