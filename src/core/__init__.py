"""
Core domain models, pricing formulas, and invariants.

This module contains the pure building blocks of the gold pricing engine.
Nothing here performs I/O or holds mutable state.
"""
