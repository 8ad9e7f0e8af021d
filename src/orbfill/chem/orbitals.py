from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from orbfill.chem.quantum import orbital_name, subshell_capacity


class InvalidQuantumNumber(ValueError):
    pass


@dataclass
class SpinSlot:
    """One magnetic sub-state of an orbital, holding up to two electrons."""

    up: bool = False
    down: bool = False

    @property
    def electrons(self) -> int:
        return int(self.up) + int(self.down)

    def fill(self) -> None:
        self.up = True
        self.down = True

    def empty(self) -> None:
        self.up = False
        self.down = False

    def __str__(self) -> str:
        if self.up:
            return "[↿⇂]" if self.down else "[↿]"
        if self.down:
            return "[⇂]"
        return "[]"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Orbital:
    """The ``2l + 1`` spin slots of one ``(n, l)`` subshell."""

    def __init__(self, n: int, l: int) -> None:
        if not _is_int(n) or n <= 0:
            raise InvalidQuantumNumber(f"Invalid primary quantum number: n={n!r}")
        if not _is_int(l) or l < 0:
            raise InvalidQuantumNumber(f"Invalid secondary quantum number: l={l!r}")
        if l >= n:
            raise InvalidQuantumNumber(
                f"Secondary quantum number must be less than the primary one: n={n}, l={l}"
            )
        self.n = n
        self.l = l
        self.name = orbital_name(n, l)
        self._slots = [SpinSlot() for _ in range(2 * l + 1)]

    @property
    def capacity(self) -> int:
        return subshell_capacity(self.l)

    max_electrons = capacity

    @property
    def slots(self) -> tuple[SpinSlot, ...]:
        return tuple(self._slots)

    @property
    def electrons(self) -> int:
        return sum(slot.electrons for slot in self._slots)

    @property
    def unpaired(self) -> int:
        return sum(1 for slot in self._slots if slot.electrons == 1)

    @property
    def is_full(self) -> bool:
        return self.electrons == self.capacity

    @property
    def is_empty(self) -> bool:
        return self.electrons == 0

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[SpinSlot]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> SpinSlot:
        return self._slots[index]

    def __repr__(self) -> str:
        return f"Orbital(n={self.n}, l={self.l}, electrons={self.electrons})"

    def __str__(self) -> str:
        return self.name + "".join(str(slot) for slot in self._slots)

    def empty(self) -> None:
        for slot in self._slots:
            slot.empty()

    def fill(self, electrons: int | None = None) -> int:
        """Place electrons and return how many are left for later orbitals.

        Every slot gets a spin-up electron before any slot is paired. Without
        an explicit count only the first slot's spin-up state is occupied.
        """
        if electrons is None:
            self._slots[0].up = True
            return 0
        if electrons >= self.capacity:
            for slot in self._slots:
                slot.fill()
            return electrons - self.capacity
        for slot in self._slots[:electrons]:
            slot.up = True
        for slot in self._slots[: max(0, electrons - len(self._slots))]:
            slot.down = True
        return 0
