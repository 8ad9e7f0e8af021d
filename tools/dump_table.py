from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from orbfill.chem.periodic_table import DEFAULT_TABLE_LENGTH, PeriodicTable


def dump_table(length: int, shorten: bool = False, element: str | None = None) -> list[str]:
    table = PeriodicTable(length)
    if element:
        try:
            selected = [table.by_atomic_number(int(element))] if element.isdigit() else [table.by_symbol(element)]
        except KeyError:
            raise SystemExit(f"Element not in table: {element}")
    else:
        selected = list(table)
    return [f"{e.atomic_number:>3} {e.notation(shorten)}" for e in selected]


def main() -> None:
    parser = argparse.ArgumentParser(description="Print ground-state electron configurations.")
    parser.add_argument("--length", type=int, default=DEFAULT_TABLE_LENGTH)
    parser.add_argument("--shorten", action="store_true", help="noble-gas core notation")
    parser.add_argument("--element", default=None, help="symbol or atomic number")
    args = parser.parse_args()
    if args.length < 0:
        raise SystemExit(f"Table length must be non-negative: {args.length}")
    for line in dump_table(args.length, shorten=args.shorten, element=args.element):
        print(line)


if __name__ == "__main__":
    main()
