"""
Module composition assembler.

Merges an ordered module selection into one contract source and edits the
selection (append, remove, drag reordering).
"""
from .composer import AssembledContract, compose, compose_source
from .selection import add_component, move_component, remove_component, resolve_selection

__all__ = [
    "AssembledContract",
    "compose",
    "compose_source",
    "add_component",
    "move_component",
    "remove_component",
    "resolve_selection",
]
