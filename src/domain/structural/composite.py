"""Composite: files and directories treated uniformly as one tree.

Each directory exclusively owns its children: adding a component that lives in
another directory moves it, so a node never has two parents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.base.exceptions import ValidationError

INDENT_STEP = 2


class CompositeStructureError(ValidationError):
    """Raised when an operation would break the tree shape."""


class FilesystemComponent(ABC):
    """Component interface for files and directories."""

    kind = "Component"

    def __init__(self, name: str):
        self.name = name
        self.parent: Optional[Directory] = None

    def detail_line(self, indent: int = 0) -> str:
        return f"{' ' * indent}{self.kind}: {self.name}"

    @abstractmethod
    def show_details(self, indent: int = 0) -> List[str]:
        """Describe this component (and its subtree) one line per node."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class File(FilesystemComponent):
    """Leaf."""

    kind = "File"

    def show_details(self, indent: int = 0) -> List[str]:
        return [self.detail_line(indent)]


class Directory(FilesystemComponent):
    """Composite: may contain files and other directories."""

    kind = "Directory"

    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[FilesystemComponent] = []

    @property
    def children(self) -> Tuple[FilesystemComponent, ...]:
        return tuple(self._children)

    def add(self, component: FilesystemComponent) -> None:
        """
        Append a child, taking it away from its previous parent.

        Adding a current child again is a no-op.

        Raises:
            CompositeStructureError: If component is this directory or one of its ancestors
        """
        if component.parent is self:
            return
        if self._is_self_or_ancestor(component):
            raise CompositeStructureError(
                f"Cannot add {component.name!r} to {self.name!r}: it would create a cycle",
                "COMPOSITE_CYCLE",
                {"parent": self.name, "child": component.name},
            )
        if component.parent is not None:
            component.parent.remove(component)
        self._children.append(component)
        component.parent = self

    def remove(self, component: FilesystemComponent) -> None:
        """Remove a child. Removing a component that is not a child is a no-op."""
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                component.parent = None
                return

    def show_details(self, indent: int = 0) -> List[str]:
        lines = [self.detail_line(indent)]
        for child in self._children:
            lines.extend(child.show_details(indent + INDENT_STEP))
        return lines

    def _is_self_or_ancestor(self, component: FilesystemComponent) -> bool:
        node: Optional[FilesystemComponent] = self
        while node is not None:
            if node is component:
                return True
            node = node.parent
        return False

    def __len__(self) -> int:
        return len(self._children)
