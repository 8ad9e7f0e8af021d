from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from orbfill.chem.orbitals import Orbital
from orbfill.chem.quantum import quantum_numbers_for

if TYPE_CHECKING:
    from orbfill.chem.periodic_table import Element


# Electron count -> symbol of the noble gas used as a bracketed core.
NOBLE_GAS_CORES: dict[int, str] = {
    2: "He",
    10: "Ne",
    18: "Ar",
    36: "Kr",
    54: "Xe",
    86: "Rn",
    118: "Og",
}


class ElectronConfiguration:
    """Orbitals of a neutral atom, kept in the order they were filled."""

    def __init__(self, electrons: int) -> None:
        self._orbitals: list[Orbital] = []
        remaining = electrons
        index = 1
        while remaining > 0:
            n, l = quantum_numbers_for(index)
            orbital = Orbital(n, l)
            self._orbitals.append(orbital)
            remaining = orbital.fill(remaining)
            index += 1

    @property
    def orbitals(self) -> tuple[Orbital, ...]:
        return tuple(self._orbitals)

    @property
    def electrons(self) -> int:
        return sum(orbital.electrons for orbital in self._orbitals)

    @property
    def unpaired(self) -> int:
        return sum(orbital.unpaired for orbital in self._orbitals)

    @property
    def valence_shell(self) -> int:
        return max((o.n for o in self._orbitals if o.electrons > 0), default=0)

    def __len__(self) -> int:
        return len(self._orbitals)

    def __iter__(self) -> Iterator[Orbital]:
        return iter(self._orbitals)

    def __getitem__(self, index: int) -> Orbital:
        return self._orbitals[index]

    def __str__(self) -> str:
        return self.notation()

    def subshells(self) -> dict[tuple[int, int], int]:
        return {(o.n, o.l): o.electrons for o in self._orbitals}

    def notation(self, shorten: bool = False) -> str:
        """Render the configuration.

        The default form lists every orbital with its spin slots in fill
        order, e.g. ``1s[↿⇂] 2s[↿]``. With ``shorten`` the orbitals are
        sorted by ``(n, l)``, written with electron counts and the largest
        complete noble-gas core is abbreviated, e.g. ``[Ar] 3d6 4s2``.
        """
        if not shorten:
            return " ".join(str(orbital) for orbital in self._orbitals)
        parts: list[str] = []
        outer = self._orbitals
        core = max((z for z in NOBLE_GAS_CORES if z < self.electrons), default=0)
        if core:
            counted = 0
            for position, orbital in enumerate(self._orbitals):
                counted += orbital.electrons
                if counted == core:
                    parts.append(f"[{NOBLE_GAS_CORES[core]}]")
                    outer = self._orbitals[position + 1:]
                    break
        for orbital in sorted(outer, key=lambda o: (o.n, o.l)):
            parts.append(f"{orbital.name}{orbital.electrons}")
        return " ".join(parts)


@dataclass(frozen=True)
class ConfigSummary:
    name: str
    localized_name: str
    symbol: str
    atomic_number: int
    total_electrons: int
    orbital_count: int
    valence_shell: int
    valence_electrons: int
    unpaired_electrons: int
    notation: str
    shorthand: str


def summarize_configuration(element: Element) -> ConfigSummary:
    config = element.electron_configuration
    valence_shell = config.valence_shell
    valence_electrons = sum(o.electrons for o in config if o.n == valence_shell)
    return ConfigSummary(
        name=element.name,
        localized_name=element.localized_name,
        symbol=element.symbol,
        atomic_number=element.atomic_number,
        total_electrons=config.electrons,
        orbital_count=len(config),
        valence_shell=valence_shell,
        valence_electrons=valence_electrons,
        unpaired_electrons=config.unpaired,
        notation=config.notation(),
        shorthand=config.notation(shorten=True),
    )
