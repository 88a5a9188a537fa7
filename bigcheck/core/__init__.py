"""
Core domain models and numeric primitives.

This module contains the building blocks that are independent of any
particular assertion grammar.
"""
