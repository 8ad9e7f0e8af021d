from __future__ import annotations

import sys
from functools import lru_cache


UNKNOWN_ELEMENT: dict[str, str] = {"symbol": "Unk", "name": "Unknown", "localizedName": "Neznámý"}

# Czech element names, index = atomic number - 1.
LOCALIZED_NAMES: tuple[str, ...] = (
    "Vodík", "Helium", "Lithium", "Beryllium", "Bor", "Uhlík", "Dusík", "Kyslík", "Fluor", "Neon",
    "Sodík", "Hořčík", "Hliník", "Křemík", "Fosfor", "Síra", "Chlor", "Argon", "Draslík", "Vápník",
    "Skandium", "Titan", "Vanad", "Chrom", "Mangan", "Železo", "Kobalt", "Nikl", "Měď", "Zinek",
    "Gallium", "Germanium", "Arsen", "Selen", "Brom", "Krypton", "Rubidium", "Stroncium", "Yttrium",
    "Zirkonium", "Niob", "Molybden", "Technecium", "Ruthenium", "Rhodium", "Palladium", "Stříbro",
    "Kadmium", "Indium", "Cín", "Antimon", "Tellur", "Jod", "Xenon", "Cesium", "Baryum", "Lanthan",
    "Cer", "Praseodym", "Neodym", "Promethium", "Samarium", "Europium", "Gadolinium", "Terbium",
    "Dysprosium", "Holmium", "Erbium", "Thulium", "Ytterbium", "Lutecium", "Hafnium", "Tantal",
    "Wolfram", "Rhenium", "Osmium", "Iridium", "Platina", "Zlato", "Rtuť", "Thallium", "Olovo",
    "Bismut", "Polonium", "Astat", "Radon", "Francium", "Radium", "Aktinium", "Thorium",
    "Protaktinium", "Uran", "Neptunium", "Plutonium", "Americium", "Curium", "Berkelium",
    "Kalifornium", "Einsteinium", "Fermium", "Mendelevium", "Nobelium", "Lawrencium",
    "Rutherfordium", "Dubnium", "Seaborgium", "Bohrium", "Hassium", "Meitnerium", "Darmstadtium",
    "Roentgenium", "Kopernicium", "Nihonium", "Flerovium", "Moscovium", "Livermorium", "Tennessin",
    "Oganesson",
)


def _load_elements() -> list[dict]:
    try:
        from periodic_table_cli.cli import load_data

        data = load_data()
    except Exception as exc:
        print(f"Element data unavailable ({exc}); using placeholders", file=sys.stderr)
        return []
    return list(data.get("elements", []))


def normalize_entries(elements: list[dict]) -> list[dict | None]:
    """Index raw element records by ``atomic number - 1``.

    Records without a usable atomic number or symbol are dropped, leaving a
    ``None`` gap that lookups treat as missing data.
    """
    by_number: dict[int, dict] = {}
    for element in elements:
        z = int(element.get("atomicNumber") or element.get("atomic_number") or 0)
        symbol = str(element.get("symbol") or "").strip()
        if z <= 0 or not symbol:
            continue
        localized = element.get("localizedName")
        if not localized and z <= len(LOCALIZED_NAMES):
            localized = LOCALIZED_NAMES[z - 1]
        by_number[z] = {
            "symbol": symbol,
            "name": str(element.get("name") or ""),
            "localizedName": str(localized or ""),
        }
    size = max(by_number, default=0)
    return [by_number.get(z) for z in range(1, size + 1)]


@lru_cache(maxsize=1)
def load_reference_data() -> tuple[dict | None, ...]:
    return tuple(normalize_entries(_load_elements()))


def reference_entry(reference, atomic_number: int) -> dict:
    """Entry for ``atomic_number`` or the unknown-element placeholder."""
    index = atomic_number - 1
    if index < 0 or index >= len(reference):
        return dict(UNKNOWN_ELEMENT)
    entry = reference[index]
    if not entry or not entry.get("symbol"):
        return dict(UNKNOWN_ELEMENT)
    return {
        "symbol": entry["symbol"],
        "name": entry.get("name") or UNKNOWN_ELEMENT["name"],
        "localizedName": entry.get("localizedName") or UNKNOWN_ELEMENT["localizedName"],
    }
