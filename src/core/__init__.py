"""
Core value types, mathematical primitives, and invariants.

This module contains the fixed-dimension vector and the promotion and
safeguard rules it is built on. It performs no I/O.
"""
