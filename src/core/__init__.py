"""
Core domain models, mathematical primitives, and built-in decimal constants.

This module contains the foundational building blocks of the decimal
arithmetic engine that are independent of any caller-side algorithm.
"""
