# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import ConfigurationError, InvariantViolation
from wheels import ALPHABET_SIZE, Alpha26, RotorSpec, get_rotor

debug = Debug()


class Rotor:
    """One wired wheel.

    Rotating the wheel is modelled as an offset into the fixed wiring: after
    ``k`` advances the wheel behaves like its wiring table shifted left by
    ``k`` slots, i.e. contact ``i`` is wired to ``wiring[(i + k) % 26]``.
    """

    def __init__(self, wiring: str, turnover: str, name: str = "?") -> None:
        if sorted(wiring) != list(Alpha26):
            raise ConfigurationError("wiring must be a permutation of alphabet")
        if len(turnover) != 1 or turnover not in Alpha26:
            raise ConfigurationError(f"Turnover {turnover!r} must be a single letter")

        self.name = name
        self.size = ALPHABET_SIZE

        # integer lookup tables
        self._fwd = [Alpha26.index(c) for c in wiring]
        self._rev = [wiring.index(c) for c in Alpha26]

        self.turnover = Alpha26.index(turnover)
        self.position = 0

    @classmethod
    def from_spec(cls, spec: RotorSpec) -> "Rotor":
        return cls(spec.wiring, spec.turnover, name=spec.name)

    # ── stepping --------------------------------------------------
    def advance(self, steps: int = 1) -> None:
        self.position = (self.position + steps) % self.size

    @property
    def head(self) -> int:
        """Wiring entry currently in slot 0."""
        return self._fwd[self.position]

    def at_turnover(self) -> bool:
        return self.head == self.turnover

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        self._check(sig)
        return self._fwd[(sig + self.position) % self.size]

    def backward(self, sig: int) -> int:
        self._check(sig)
        return (self._rev[sig] - self.position) % self.size

    def _check(self, sig: int) -> None:
        if not 0 <= sig < self.size:
            raise InvariantViolation(f"Signal {sig} out of range for rotor {self.name}")

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} head={Alpha26[self.head]}>"


class Reflector:
    def __init__(self, wiring: str, name: str = "?") -> None:
        if len(wiring) != ALPHABET_SIZE or sorted(wiring) != list(Alpha26):
            raise ConfigurationError("Reflector wiring must be a permutation of the alphabet")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = Alpha26.index(c)
            if wiring[j] != Alpha26[i] or i == j:
                raise ConfigurationError("Reflector wiring must be an involution with no fixed points")

        self.name = name
        self._map = [Alpha26.index(c) for c in wiring]

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{sig}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"


class RotorStack:
    """The rotor bank. Index 0 is the rightmost, fastest wheel."""

    def __init__(self, identities: Sequence[int | str] | None = None) -> None:
        self.rotors: list[Rotor] = []
        if identities is not None:
            self.configure(identities)

    def configure(self, identities: Sequence[int | str]) -> None:
        """Fit fresh copies of the named catalog rotors, fastest first."""
        if not identities:
            raise ConfigurationError("At least one rotor is required")
        self.rotors = [Rotor.from_spec(get_rotor(ident)) for ident in identities]
        debug.log("rotor", f"configured {[r.name for r in self.rotors]}")

    def __len__(self) -> int:
        return len(self.rotors)

    # ── key helpers ─────────────────────────────────────────────
    @property
    def positions(self) -> list[int]:
        return [r.position for r in self.rotors]

    def set_positions(self, key: str | Sequence[int]) -> None:
        """Turn every rotor to *key*, rotor 0 first (``"AAA"`` or ``[0, 0, 0]``)."""
        self._require_configured()
        if len(key) != len(self.rotors):
            raise ConfigurationError(
                f"Need {len(self.rotors)} rotor positions, got {len(key)}"
            )
        for rotor, item in zip(self.rotors, key):
            if isinstance(item, str):
                letter = item.upper()
                if letter not in Alpha26:
                    raise ConfigurationError(f"Position {item!r} is not a letter")
                rotor.position = Alpha26.index(letter)
            else:
                rotor.position = item % ALPHABET_SIZE

    # ── stepping logic  ─────────────────────────────────────────
    def step(self) -> None:
        """Advance the bank by one key-press.

        The fastest rotor always moves; each rotor resting on its turnover
        (checked after the rotors to its right have moved) carries one
        step into its left neighbour.
        """
        self._require_configured()
        self.rotors[0].advance()
        for rotor, left in zip(self.rotors, self.rotors[1:]):
            if rotor.at_turnover():
                left.advance()

        if debug.active("stepping"):
            debug.log("stepping", f"Rotor pos {self.positions}")

    # ── lookups ─────────────────────────────────────────────────
    def forward_lookup(self, index: int, code: int) -> int:
        return self._rotor(index).forward(code)

    def inverse_lookup(self, index: int, code: int) -> int:
        return self._rotor(index).backward(code)

    def _rotor(self, index: int) -> Rotor:
        self._require_configured()
        if not 0 <= index < len(self.rotors):
            raise InvariantViolation(f"No rotor at index {index}")
        return self.rotors[index]

    def _require_configured(self) -> None:
        if not self.rotors:
            raise InvariantViolation("Rotor stack used before configure()")

    def __repr__(self) -> str:
        return f"<RotorStack {self.rotors}>"
