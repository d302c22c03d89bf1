"""Line of succession in a royal family tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class _Person:
    name: str
    alive: bool = True
    children: list[_Person] = field(default_factory=list)


class Monarchy:
    """A family tree rooted at the king, giving the order of succession."""

    def __init__(self, king: str) -> None:
        self._king = _Person(king)

    def _preorder(self) -> Iterator[_Person]:
        stack = [self._king]
        while stack:
            person = stack.pop()
            yield person
            stack.extend(reversed(person.children))

    def _find(self, name: str) -> _Person | None:
        return next((p for p in self._preorder() if p.name == name), None)

    def birth(self, child: str, parent: str) -> None:
        """Record a child of ``parent``; an unknown parent is ignored."""
        person = self._find(parent)
        if person is not None:
            person.children.append(_Person(child))

    def death(self, name: str) -> None:
        """Mark ``name`` as dead; an unknown name is ignored."""
        person = self._find(name)
        if person is not None:
            person.alive = False

    def succession(self) -> list[str]:
        """Living family members in order of succession."""
        return [p.name for p in self._preorder() if p.alive]