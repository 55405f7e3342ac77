"""Enumerations, enumeration items and the collection that holds them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Union

_ItemSource = Union[Mapping[str, int], Iterable[tuple[str, int]]]


@dataclass(frozen=True, eq=False)
class Enum:
    """A named enumeration with an ordered list of (name, value) items."""

    name: str
    items: tuple[tuple[str, int], ...] = field(default=())

    def __post_init__(self) -> None:
        source = self.items
        pairs = source.items() if isinstance(source, Mapping) else source
        object.__setattr__(
            self, "items", tuple((str(name), int(value)) for name, value in pairs)
        )

    def get_enum_items(self) -> list[EnumItem]:
        """Return every item of this enumeration, in declaration order."""
        return [EnumItem(self, name, value) for name, value in self.items]

    def item(self, name: str) -> EnumItem:
        """Return the item called ``name``."""
        for item_name, value in self.items:
            if item_name == name:
                return EnumItem(self, item_name, value)
        raise LookupError(
            f"The enum item '{name}' does not exist for enum '{self.name}'"
        )

    def item_by_value(self, value: int) -> EnumItem:
        """Return the first item whose value is ``value``."""
        for item_name, item_value in self.items:
            if item_value == value:
                return EnumItem(self, item_name, item_value)
        raise LookupError(
            f"The enum item with value {value} does not exist for enum '{self.name}'"
        )

    def __str__(self) -> str:
        return f"Enum.{self.name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enum):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True, eq=False)
class EnumItem:
    """A single item of an enumeration."""

    parent: Enum
    name: str
    value: int

    @property
    def enum_type(self) -> Enum:
        return self.parent

    def __str__(self) -> str:
        return f"{self.parent}.{self.name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumItem):
            return NotImplemented
        return self.parent == other.parent and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.parent.name, self.value))


class Enums:
    """The collection of all known enumerations, looked up by name."""

    def __init__(self, enums: Mapping[str, _ItemSource]) -> None:
        self._enums = {name: Enum(name, items) for name, items in enums.items()}

    def get_enums(self) -> list[Enum]:
        """Return every enumeration in the collection."""
        return list(self._enums.values())

    def get(self, name: str) -> Enum:
        """Return the enumeration called ``name``."""
        try:
            return self._enums[name]
        except KeyError:
            raise LookupError(f"The enum '{name}' does not exist") from None

    def item(self, enum_name: str, name: str) -> EnumItem:
        """Return the item ``name`` of the enumeration ``enum_name``."""
        return self.get(enum_name).item(name)

    def item_by_value(self, enum_name: str, value: int) -> EnumItem:
        """Return the item with ``value`` of the enumeration ``enum_name``."""
        return self.get(enum_name).item_by_value(value)

    def __str__(self) -> str:
        return "Enum"