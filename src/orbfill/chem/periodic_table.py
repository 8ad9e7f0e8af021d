from __future__ import annotations

from numbers import Real
from typing import Iterator, Sequence

from orbfill.chem.electron_configuration import ElectronConfiguration
from orbfill.chem.elements import UNKNOWN_ELEMENT, load_reference_data, reference_entry


DEFAULT_TABLE_LENGTH = 118


class InvalidAtomicNumber(ValueError):
    pass


def _coerce_atomic_number(value) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidAtomicNumber(f"Invalid atomic number: {value!r}")
    if value < 0 or value % 1 != 0:
        raise InvalidAtomicNumber(f"Invalid atomic number: {value!r}")
    return int(value)


class Element:
    def __init__(
        self,
        atomic_number: int,
        symbol: str,
        name: str,
        localized_name: str,
        electron_configuration: ElectronConfiguration,
    ) -> None:
        self.atomic_number = atomic_number
        self.symbol = symbol
        self.name = name
        self.localized_name = localized_name
        self.electron_configuration = electron_configuration

    @property
    def is_placeholder(self) -> bool:
        return self.symbol == UNKNOWN_ELEMENT["symbol"]

    def notation(self, shorten: bool = False) -> str:
        return f"{self.symbol}: {self.electron_configuration.notation(shorten)}"

    def __str__(self) -> str:
        return self.notation()

    def __repr__(self) -> str:
        return f"Element({self.atomic_number}, {self.symbol!r})"


def create_element(atomic_number, reference: Sequence[dict | None] | None = None) -> Element:
    """Build an element and its ground-state configuration.

    ``reference`` is indexed by ``atomic number - 1``; missing entries get the
    unknown-element placeholder. The element is returned, not stored anywhere.
    """
    z = _coerce_atomic_number(atomic_number)
    if reference is None:
        reference = load_reference_data()
    entry = reference_entry(reference, z)
    return Element(
        atomic_number=z,
        symbol=entry["symbol"],
        name=entry["name"],
        localized_name=entry["localizedName"],
        electron_configuration=ElectronConfiguration(z),
    )


class PeriodicTable:
    """Fixed-length table of elements with atomic numbers ``1..length``."""

    def __init__(
        self,
        length: int = DEFAULT_TABLE_LENGTH,
        reference: Sequence[dict | None] | None = None,
    ) -> None:
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise ValueError(f"Table length must be a non-negative integer, got {length!r}")
        if reference is None:
            reference = load_reference_data()
        self._elements: list[Element | None] = [None] * length
        for atomic_number in range(1, length + 1):
            self.register(create_element(atomic_number, reference))

    def register(self, element: Element) -> None:
        """Store ``element`` at its slot, replacing any earlier occupant."""
        index = element.atomic_number - 1
        if not 0 <= index < len(self._elements):
            raise IndexError(
                f"Atomic number {element.atomic_number} does not fit a table of {len(self._elements)}"
            )
        self._elements[index] = element

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> Element:
        return self._elements[index]

    def by_atomic_number(self, atomic_number: int) -> Element:
        if not 1 <= atomic_number <= len(self._elements):
            raise KeyError(atomic_number)
        return self._elements[atomic_number - 1]

    def by_symbol(self, symbol: str) -> Element:
        wanted = symbol.strip().lower()
        for element in self._elements:
            if element is not None and element.symbol.lower() == wanted:
                return element
        raise KeyError(symbol)


def table_position(element: Element) -> tuple[int, int] | None:
    """Grid cell ``(row, column)`` of ``element`` in an 18-column layout.

    The cell follows from the last orbital filled: s and p blocks sit in
    period ``n``, d in ``n + 1``, and the f block on two rows under period 7.
    """
    config = element.electron_configuration
    if not len(config):
        return None
    last = config[-1]
    n, l, electrons = last.n, last.l, last.electrons
    if l == 0:
        if n == 1 and electrons == 2:
            return 0, 17
        return n - 1, electrons - 1
    if l == 1:
        return n - 1, 11 + electrons
    if l == 2:
        return n, 1 + electrons
    if l == 3:
        return n + 4, 1 + electrons
    return None
