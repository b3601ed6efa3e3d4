"""
A minimal component lifecycle, in the style of the component trees used by
markdown editors to manage the resources associated with a rendered view.

A :py:class:`Component` may be loaded and unloaded. Loading a component loads
all of its children and unloading it unloads all of its children (in reverse
order) before running any registered cleanup callbacks.

Long-running work owned by a component (e.g. an in-progress render) should
check :py:attr:`Component.loaded` after each suspension point and stop if the
component has since been unloaded.

.. autoclass:: Component
    :members:
"""

from typing import Callable, List, TypeVar


C = TypeVar("C", bound="Component")


class Component:
    _loaded: bool
    _children: List["Component"]
    _cleanups: List[Callable[[], None]]

    def __init__(self) -> None:
        self._loaded = False
        self._children = []
        self._cleanups = []

    @property
    def loaded(self) -> bool:
        """True between calls to :py:meth:`load` and :py:meth:`unload`."""
        return self._loaded

    @property
    def children(self) -> List["Component"]:
        return list(self._children)

    def load(self) -> None:
        """Load this component and then all of its children."""
        if self._loaded:
            return
        self._loaded = True
        self.on_load()
        for child in list(self._children):
            child.load()

    def unload(self) -> None:
        """
        Unload all children (most recently added first), run all registered
        callbacks (most recently registered first) and then unload this
        component.
        """
        if not self._loaded:
            return
        self._loaded = False

        while self._children:
            self._children.pop().unload()

        while self._cleanups:
            self._cleanups.pop()()

        self.on_unload()

    def add_child(self, child: C) -> C:
        """Add a child component, loading it immediately if we're loaded."""
        self._children.append(child)
        if self._loaded:
            child.load()
        return child

    def remove_child(self, child: "Component") -> None:
        """Remove and unload a child component (if present)."""
        if child in self._children:
            self._children.remove(child)
            child.unload()

    def register(self, callback: Callable[[], None]) -> None:
        """Register a callback to be called when this component is unloaded."""
        self._cleanups.append(callback)

    def on_load(self) -> None:
        """Called when the component is loaded. Override as required."""

    def on_unload(self) -> None:
        """Called when the component is unloaded. Override as required."""
