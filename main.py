# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, List, Sequence, TextIO

from debug import Debug
from enigma import DEFAULT_REFLECTOR, DEFAULT_ROTORS, Enigma, configure
from errors import ConfigurationError

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()

CHUNK_SIZE = 127


@dataclass(slots=True)
class Config:
    """Machine settings and stream switches for one run."""

    rotors: List[str] = field(default_factory=lambda: [str(r) for r in DEFAULT_ROTORS])
    reflector: str = str(DEFAULT_REFLECTOR)
    plugs: List[str] = field(default_factory=list)     # e.g. ["AB", "CD"]
    positions: str | None = None                       # window letters, rotor 0 first
    chunk_size: int = CHUNK_SIZE                        # bytes read per chunk
    block: int = 0                                      # display group size, 0 = none

    def build(self) -> Enigma:
        return configure(self.rotors, self.reflector, self.plugs, self.positions)


# ────────────────────────────────────────────────────────────────────────
#  1. Stream driver
# ────────────────────────────────────────────────────────────────────────


def run_stream(
    machine: Enigma,
    instream: BinaryIO,
    outstream: TextIO,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """Pipe the raw bytes of *instream* through *machine* chunk by chunk.

    Every byte is one key press: a line feed closing a chunk is framing
    and is dropped, any other non-letter byte (including each byte of a
    multi-byte UTF-8 character) is typed as ``X``. The machine is never
    rewound between chunks. Returns the number of bytes enciphered.
    """
    if chunk_size < 1:
        raise ConfigurationError(f"Chunk size must be positive, got {chunk_size}")

    total = 0
    while True:
        chunk = instream.read(chunk_size)
        if not chunk:
            break
        if chunk.endswith(b"\n"):
            chunk = chunk[:-1]
        if not chunk:
            continue

        total += len(chunk)
        outstream.write(machine.process(chunk))
        outstream.flush()
        debug.log("stream", f"chunk of {len(chunk)} bytes, window {machine.window}")

    if total:
        outstream.write("\n")
    return total


def group(text: str, block: int) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Encrypt or decrypt with an Enigma rotor machine. "
        "Reads stdin unless --message is given."
    )
    p.add_argument("-m", "--message", metavar="TEXT", help="Encipher TEXT once and print the result.")
    p.add_argument(
        "--rotors", nargs="+", metavar="ROTOR", default=[str(r) for r in DEFAULT_ROTORS],
        help="Rotor identities, fastest first: 1-5 or I-V. Default: 2 1 3",
    )
    p.add_argument("--reflector", default=str(DEFAULT_REFLECTOR), help="Reflector 1-4 or B, C, B-THIN, C-THIN. Default: 1 (B)")
    p.add_argument("--plugs", nargs="*", metavar="PAIR", default=[], help="Plugboard pairs, e.g. AB CD EF")
    p.add_argument("--positions", metavar="KEY", help="Initial rotor positions, rotor 0 first (default all A)")
    p.add_argument("--chunk-size", dest="chunk_size", type=int, default=CHUNK_SIZE, help=f"Stdin read size. Default: {CHUNK_SIZE}")
    p.add_argument("--block", type=int, default=0, help="Group --message output in blocks of N letters")
    p.add_argument(
        "--debug", action="append", default=[], metavar="COMPONENT",
        choices=sorted(Debug.components), help="Log one component (repeatable)",
    )
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        rotors=list(args.rotors),
        reflector=args.reflector,
        plugs=list(args.plugs),
        positions=args.positions,
        chunk_size=args.chunk_size,
        block=args.block,
    )


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.debug:
        debug.enable(*args.debug)

    cfg = config_from_args(args)
    try:
        machine = cfg.build()
    except ConfigurationError as e:
        raise SystemExit(f"❌  {e}")

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(group(machine.process(args.message), cfg.block))
        return 0

    try:
        run_stream(machine, sys.stdin.buffer, sys.stdout, cfg.chunk_size)
    except ConfigurationError as e:
        raise SystemExit(f"❌  {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
