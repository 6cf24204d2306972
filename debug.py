# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher", "stream")


class Debug:
    """Per-component tracing for the machine.

    Every module keeps its own ``debug = Debug()`` but the switches live on
    the class, so ``--debug stepping`` on the command line lights up the
    rotor bank wherever it is driven from. All output goes to the
    ``ENIGMA`` logger.
    """

    _root_configured: bool = False
    _enabled: bool = True
    components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    def __init__(self, *, log_to: str | None = None) -> None:
        # root handlers are installed once, by whichever module imports first
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=logging.DEBUG,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=handlers,
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")

    @property
    def enabled(self) -> bool:
        return Debug._enabled

    # ── emit ─────────────────────────────────────────────────────
    def active(self, component: str) -> bool:
        return Debug._enabled and self.components.get(component, False)

    def log(self, component: str, message: str) -> None:
        if self.active(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── switches ─────────────────────────────────────────────────
    def enable(self, *components: str) -> None:
        self._set(components, True)

    def disable(self, *components: str) -> None:
        self._set(components, False)

    def toggle(self, component: str) -> None:
        self._set((component,), not self.components.get(component, False))

    def toggle_global(self, state: bool) -> None:
        """Master switch; component settings survive it."""
        Debug._enabled = state

    def status(self) -> Dict[str, bool]:
        return dict(self.components)

    def _set(self, components: tuple[str, ...], state: bool) -> None:
        unknown = [c for c in components if c not in self.components]
        if unknown:
            raise ValueError(f"No such component: {unknown[0]!r}")
        for c in components:
            self.components[c] = state

    def __repr__(self) -> str:
        on = ",".join(k for k, v in self.components.items() if v) or "-"
        return f"<Debug {'on' if self.enabled else 'off'} [{on}]>"
