"""CleanContext — the single mutable state object flowing through all passes."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgbuilder.engine.config import CleanerConfig
from svgbuilder.svg.tree import RootElement


@dataclass
class CleanContext:
    """Shared state for one pipeline invocation. Owns ``root`` exclusively."""

    root: RootElement
    config: CleanerConfig = field(default_factory=CleanerConfig)

    # --- Pipeline metadata ---
    completed_passes: list[str] = field(default_factory=list)
    # Nodes/attributes removed or rewritten, per pass id
    changes: dict[str, int] = field(default_factory=dict)

    # Identifier allocation state (populated lazily by the id pass)
    _taken_ids: set[str] | None = None
    _id_counter: int = 0

    def record(self, pass_id: str, count: int = 1) -> None:
        if count:
            self.changes[pass_id] = self.changes.get(pass_id, 0) + count

    def next_id(self) -> str:
        """Allocate an identifier unused anywhere in the tree."""
        if self._taken_ids is None:
            self._taken_ids = {el.id for el in self.root.iter() if el.id}
        while True:
            self._id_counter += 1
            candidate = f"{self.config.id_prefix}{self._id_counter}"
            if candidate not in self._taken_ids:
                self._taken_ids.add(candidate)
                return candidate
