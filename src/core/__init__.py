"""
Core domain models, denomination grammar, and JSON contracts.

This module contains the foundational building blocks that are independent
of external systems (chain state, transaction processing, etc.).
"""
