# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from debug import Debug
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, RotorStack
from wheels import Alpha26, get_reflector

debug = Debug()

DEFAULT_ROTORS: tuple[int, ...] = (2, 1, 3)       # II, I, III
DEFAULT_REFLECTOR: int = 1                        # B


class Enigma:
    """Plugboard → rotor bank → reflector → rotor bank → plugboard.

    The same call enciphers and deciphers: start two machines (or one,
    rewound) from the same key and feed one the other's output.
    """

    def __init__(
        self,
        kb: Keyboard,
        pb: Plugboard,
        stack: RotorStack,
        reflector: Reflector,
        positions: str | Sequence[int] | None = None,
    ) -> None:
        self.kb         = kb
        self.pb         = pb
        self.stack      = stack
        self.reflector  = reflector

        if positions is not None:
            self.stack.set_positions(positions)
        self._start = self.stack.positions

    # ── key helpers ─────────────────────────────────────────────

    def rewind(self) -> None:
        """Turn the rotors back to where they stood after configuration."""
        self.stack.set_positions(self._start)

    @property
    def window(self) -> str:
        """Current rotor offsets as letters, rotor 0 first."""
        return "".join(self.kb.backward(p) for p in self.stack.positions)

    # ── one symbol  ─────────────────────────────────────────────

    def step(self) -> None:
        self.stack.step()

    def transform(self, code: int) -> int:
        """Map *code* through the wiring as it stands; does not step."""
        signal = self.pb.forward(code)

        for i in range(len(self.stack)):
            signal = self.stack.forward_lookup(i, signal)

        signal = self.reflector.reflect(signal)

        for i in reversed(range(len(self.stack))):
            signal = self.stack.inverse_lookup(i, signal)

        signal = self.pb.backward(signal)
        debug.log("encipher", f"{code}->{signal}")
        return signal

    # ── streams  ────────────────────────────────────────────────

    def encrypt_or_decrypt(self, codes: Iterable[int]) -> list[int]:
        out: list[int] = []
        for code in codes:
            self.step()
            out.append(self.transform(code))
        return out

    def process(self, text: str | bytes | bytearray) -> str:
        codes = self.kb.encode(text)
        return self.kb.decode(self.encrypt_or_decrypt(codes))

    def __repr__(self) -> str:
        return (
            f"<Enigma rotors={[r.name for r in self.stack.rotors]} "
            f"reflector={self.reflector.name} window={self.window}>"
        )


def configure(
    rotors: Sequence[int | str] = DEFAULT_ROTORS,
    reflector: int | str = DEFAULT_REFLECTOR,
    plugboard: Plugboard | str | Sequence[str] | None = None,
    positions: str | Sequence[int] | None = None,
) -> Enigma:
    """Build a ready machine from catalog identities.

    *plugboard* may be a :class:`Plugboard`, a full 26-letter wiring, a
    list of pairs such as ``["AB", "CD"]`` (or ``"AB CD"``), or None for
    no cables.
    Raises :class:`errors.ConfigurationError` on any unknown identity.
    """
    if plugboard is None:
        pb = Plugboard()
    elif isinstance(plugboard, Plugboard):
        pb = plugboard
    elif isinstance(plugboard, str) and len(plugboard) == len(Alpha26) \
            and not any(ch.isspace() for ch in plugboard):
        pb = Plugboard.from_wiring(plugboard)
    elif isinstance(plugboard, str):
        pb = Plugboard(plugboard.split())
    else:
        pb = Plugboard(plugboard)

    refl_spec = get_reflector(reflector)

    return Enigma(
        Keyboard(),
        pb,
        RotorStack(rotors),
        Reflector(refl_spec.wiring, name=refl_spec.name),
        positions,
    )
