"""
Short-code redirect service: in-memory entry store, visit log and the
resolve-and-record transaction that couples them.
"""

__version__ = "1.0.0"
