"""Core charting types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol


@dataclass(frozen=True)
class Attribute:
    """Foreground/background color pair applied to subsequent writes.

    Colors are terminal color names understood by ``rich`` (``"bright_blue"``,
    ``"white"``, ``"default"``, ...).
    """

    fg: str
    bg: str = "default"

    @property
    def style(self) -> str:
        return f"{self.fg} on {self.bg}"


@dataclass
class ChartRenderResult:
    """Outcome of one render call.

    ``status`` is one of ``ok``, ``empty``, ``too_small``, ``collapsed`` or
    ``error``; ``meta`` records what was laid out and drawn.
    """

    status: str
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def drew_chart(self) -> bool:
        return self.status == "ok"


class CharGridSurface(Protocol):  # pragma: no cover - structural only
    """Character grid the renderer draws on.

    Writes outside ``width`` x ``height`` must be ignored by implementations.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def set_attribute(self, attribute: Attribute) -> None: ...

    def move(self, x: int, y: int) -> None: ...

    def add_char(self, ch: str) -> None: ...
