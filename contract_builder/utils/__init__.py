"""
Utility functions module.

Shared helpers for timestamps and identifiers used by deployment sessions.
"""
