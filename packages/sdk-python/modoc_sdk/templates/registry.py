"""
Fragment Registry
=================

Named template fragments, stored by name and handed to the template
engine as a single namespace in which every fragment can include any
other by name.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from modoc_common import ValidationError, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Fragment:
    """A named, reusable unit of template source text."""

    name: str
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError("Fragment name cannot be empty")
        if not isinstance(self.text, str):
            raise ValidationError(
                f"Fragment '{self.name}' text must be a string, got {type(self.text).__name__}"
            )


class FragmentRegistry:
    """
    Ordered collection of fragments keyed by name.

    Registering a name twice keeps the last fragment and logs a warning.
    """

    def __init__(self, fragments: Optional[Iterable[Fragment]] = None):
        self._fragments: Dict[str, Fragment] = {}
        for fragment in fragments or ():
            self.add(fragment)

    def add(self, fragment: Fragment) -> None:
        if fragment.name in self._fragments:
            logger.warning("Fragment registered twice, keeping the last one", fragment=fragment.name)
        self._fragments[fragment.name] = fragment

    def get(self, name: str) -> Optional[Fragment]:
        return self._fragments.get(name)

    def names(self) -> List[str]:
        return list(self._fragments)

    def as_mapping(self) -> Mapping[str, str]:
        """Fragment sources by name, as consumed by the template loader."""
        return {name: fragment.text for name, fragment in self._fragments.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._fragments

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments.values())

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"FragmentRegistry({self.names()})"
