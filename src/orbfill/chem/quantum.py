from __future__ import annotations

import sys


# Spectroscopic letters by secondary quantum number; "j" is skipped and
# letters already used for lower l are not repeated.
ORBITAL_LETTERS: tuple[str, ...] = (
    "s", "p", "d", "f", "g", "h", "i", "k", "l", "m", "n",
    "o", "q", "r", "t", "u", "v", "w", "x", "y", "z",
)


def _require_positive_int(value, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{label} must be at least 1, got {value}")
    return value


def group_size(group: int) -> int:
    """Number of orbitals sharing the value ``n + l == group``."""
    return (_require_positive_int(group, "n + l group") + 1) // 2


def subshell_capacity(l: int) -> int:
    return 2 * (2 * l + 1)


def quantum_numbers_for(index: int) -> tuple[int, int]:
    """Return ``(n, l)`` of the ``index``-th orbital in Madelung fill order.

    Orbitals are ordered by increasing ``n + l``; within one ``n + l`` group
    the largest ``l`` comes first. ``index`` is 1-based, so ``1`` is 1s,
    ``3`` is 2p and ``7`` is 3d.
    """
    index = _require_positive_int(index, "Orbital index")
    group = 0
    seen = 0
    while seen < index:
        group += 1
        seen += group_size(group)
    before = seen - group_size(group)
    max_l = (group + 1) // 2 - 1
    l = max_l - (index - before - 1)
    return group - l, l


def fill_order(count: int) -> list[tuple[int, int, int]]:
    """First ``count`` subshells in fill order as ``(n, l, capacity)``."""
    order: list[tuple[int, int, int]] = []
    for index in range(1, count + 1):
        n, l = quantum_numbers_for(index)
        order.append((n, l, subshell_capacity(l)))
    return order


def orbital_name(n: int, l: int) -> str:
    if l < len(ORBITAL_LETTERS):
        return f"{n}{ORBITAL_LETTERS[l]}"
    print(
        f"OrbitalLetterExhausted: no letter for l={l} (n={n}), using numeric label",
        file=sys.stderr,
    )
    return f"n:{n} l:{l}"
