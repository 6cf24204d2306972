# wheels.py
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Dict, Tuple

from errors import ConfigurationError

# ────────────────────────────────────────────────────────────────────────
#  0. Alphabet
# ────────────────────────────────────────────────────────────────────────

Alpha26 = string.ascii_uppercase
ALPHABET_SIZE = len(Alpha26)
PLACEHOLDER = "X"


# ────────────────────────────────────────────────────────────────────────
#  1. Wheel records
# ────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RotorSpec:
    """Static wiring of one catalog rotor."""

    name: str
    wiring: str
    turnover: str        # window letter that carries into the next rotor

    @property
    def turnover_offset(self) -> int:
        return Alpha26.index(self.turnover)


@dataclass(frozen=True, slots=True)
class ReflectorSpec:
    name: str
    wiring: str


# ────────────────────────────────────────────────────────────────────────
#  2. Wheel database
# ────────────────────────────────────────────────────────────────────────

ROTORS: Tuple[RotorSpec, ...] = (
    RotorSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", turnover="R"),
    RotorSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", turnover="F"),
    RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", turnover="W"),
    RotorSpec("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", turnover="K"),
    RotorSpec("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", turnover="A"),
)

REFLECTORS: Tuple[ReflectorSpec, ...] = (
    ReflectorSpec("B",      "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    ReflectorSpec("C",      "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
    ReflectorSpec("B-THIN", "ENKQAUYWJICOPBLMDXZVFTHRGS"),
    ReflectorSpec("C-THIN", "RDOBJNTKVEHMLFCWZAXGYIPSUQ"),
)

rotor_dict: Dict[str, RotorSpec] = {r.name: r for r in ROTORS}
reflector_dict: Dict[str, ReflectorSpec] = {r.name: r for r in REFLECTORS}


# ────────────────────────────────────────────────────────────────────────
#  3. Lookup helpers
# ────────────────────────────────────────────────────────────────────────


def _lookup(kind: str, identity: int | str, table: tuple, by_name: dict):
    """Resolve *identity* (1-based index or name) against a catalog."""
    if isinstance(identity, str):
        key = identity.strip().upper()
        if key.isdecimal():
            identity = int(key)
        elif key in by_name:
            return by_name[key]
        else:
            raise ConfigurationError(
                f"Unknown {kind} {identity!r}. Expected one of {list(by_name)}"
            )

    if isinstance(identity, bool) or not isinstance(identity, int):
        raise ConfigurationError(f"{kind.capitalize()} identity must be int or str, got {identity!r}")
    if not 1 <= identity <= len(table):
        raise ConfigurationError(
            f"{kind.capitalize()} index {identity} out of range 1–{len(table)}"
        )
    return table[identity - 1]


def get_rotor(identity: int | str) -> RotorSpec:
    """Return the catalog rotor for *identity* (``2``, ``"2"`` or ``"II"``)."""
    return _lookup("rotor", identity, ROTORS, rotor_dict)


def get_reflector(identity: int | str) -> ReflectorSpec:
    return _lookup("reflector", identity, REFLECTORS, reflector_dict)


__all__ = [
    "Alpha26",
    "ALPHABET_SIZE",
    "PLACEHOLDER",
    "RotorSpec",
    "ReflectorSpec",
    "ROTORS",
    "REFLECTORS",
    "rotor_dict",
    "reflector_dict",
    "get_rotor",
    "get_reflector",
]
