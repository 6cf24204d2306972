# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable, Sequence
from debug import Debug
from errors import ConfigurationError, InvariantViolation
from wheels import ALPHABET_SIZE, Alpha26, PLACEHOLDER

debug = Debug()

_PLACEHOLDER_CODE = Alpha26.index(PLACEHOLDER)


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Letters in, integer signals out (and back).

    The keyboard only has the 26 Latin letters. Lower case is folded to
    upper case and every other key press (digits, blanks, punctuation,
    accented letters) is typed as ``X``; nothing is ever rejected.
    """

    def __init__(self) -> None:
        self.alphabet: str = Alpha26
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(Alpha26)
        }
        self.alpha_to_index.update(
            {ch.lower(): i for i, ch in enumerate(Alpha26)}
        )

    # letter → integer signal
    def forward(self, letter: str | int) -> int:
        if isinstance(letter, int):         # a raw byte value
            letter = chr(letter)
        return self.alpha_to_index.get(letter, _PLACEHOLDER_CODE)

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < ALPHABET_SIZE):
            raise InvariantViolation(
                f"Signal {signal} out of range 0–{ALPHABET_SIZE - 1}"
            )
        return self.alphabet[signal]

    def encode(self, text: str | bytes | bytearray) -> list[int]:
        codes = [self.forward(ch) for ch in text]
        if debug.active("keyboard"):
            debug.log("keyboard", f"{text!r} -> {codes}")
        return codes

    def decode(self, codes: Iterable[int]) -> str:
        return "".join(self.backward(c) for c in codes)


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Sequence[str | tuple[str, str]] = ()) -> None:
        self.alphabet: str = Alpha26
        self._table: list[int] = list(range(ALPHABET_SIZE))
        used: set[str] = set()

        for raw in pairs:
            # normalise to (A, B)
            if isinstance(raw, str):
                if len(raw) != 2:
                    raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
                a, b = raw.upper()
            else:
                a, b = (ch.upper() for ch in raw)

            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
            if a not in self.alphabet or b not in self.alphabet:
                bad = a if a not in self.alphabet else b
                raise ConfigurationError(f"Letter {bad!r} not in alphabet")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            ia, ib = self.alphabet.index(a), self.alphabet.index(b)
            self._table[ia], self._table[ib] = ib, ia
            used.update((a, b))

    @classmethod
    def from_wiring(cls, wiring: str) -> "Plugboard":
        """Build from a full 26-letter table, e.g. ``"BACDEF…"``.

        The table must pair letters off (an involution), since the board
        is applied unchanged on the way back.
        """
        wiring = wiring.upper()
        if sorted(wiring) != list(Alpha26):
            raise ConfigurationError("Plugboard wiring must be a permutation of the alphabet")

        table = [Alpha26.index(c) for c in wiring]
        for i, j in enumerate(table):
            if table[j] != i:
                raise ConfigurationError(
                    f"Plugboard wiring is not symmetric: "
                    f"{Alpha26[i]}->{Alpha26[j]} but {Alpha26[j]}->{Alpha26[table[j]]}"
                )

        board = cls()
        board._table = table
        return board

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        mapped = self._table[signal]
        debug.log("plugboard", f"{signal}->{mapped}")
        return mapped

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    @property
    def wiring(self) -> str:
        return "".join(self.alphabet[i] for i in self._table)

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [
            f"{self.alphabet[i]}{self.alphabet[j]}"
            for i, j in enumerate(self._table) if i < j
        ]
        return f"<Plugboard {' '.join(swaps)}>"
