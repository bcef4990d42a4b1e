"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks: dense linear algebra,
geometric value types and JSON contracts. Nothing here holds state between calls.
"""
