"""
Selection editing.

A selection is an ordered tuple of modules. Every operation returns a new
tuple and leaves its input untouched.
"""

from typing import Iterable, Sequence

from ..errors import IndexOutOfRangeError
from ..registry.catalog import ComponentRegistry, ContractModule


def _check_index(index: int, length: int, name: str) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < length:
        raise IndexOutOfRangeError(
            f"{name} {index!r} is outside [0, {length})",
            index=index if isinstance(index, int) else None,
            length=length,
            context={"argument": name}
        )


def move_component(
    selection: Sequence[ContractModule],
    drag_index: int,
    hover_index: int
) -> tuple[ContractModule, ...]:
    """
    Relocate the element at drag_index to hover_index.

    All other elements keep their relative order.

    Raises:
        IndexOutOfRangeError: If either index is outside [0, len(selection))
    """
    items = list(selection)
    _check_index(drag_index, len(items), "drag_index")
    _check_index(hover_index, len(items), "hover_index")

    dragged = items.pop(drag_index)
    items.insert(hover_index, dragged)
    return tuple(items)


def add_component(
    selection: Sequence[ContractModule],
    module: ContractModule
) -> tuple[ContractModule, ...]:
    """Append a module to the end of the selection."""
    return (*selection, module)


def remove_component(
    selection: Sequence[ContractModule],
    index: int
) -> tuple[ContractModule, ...]:
    """Drop the element at index."""
    _check_index(index, len(selection), "index")
    return tuple(module for i, module in enumerate(selection) if i != index)


def resolve_selection(
    registry: ComponentRegistry,
    component_ids: Iterable[str]
) -> tuple[ContractModule, ...]:
    """Map module ids to registry modules, keeping the given order."""
    return tuple(registry.get(component_id) for component_id in component_ids)
