"""Shared view-model pieces: load states, toast notifications, tile themes."""

import enum
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class ViewState(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class Toast:
    """A transient user-visible notification."""

    title: str
    description: str
    variant: str = "default"  # default | destructive


@dataclass
class Notifier:
    """Collects toasts raised by views; the page layer decides how to show them.

    Error toasts are not logged here: the raising view already logged the cause.
    """

    toasts: list[Toast] = field(default_factory=list)

    def success(self, description: str) -> None:
        self.toasts.append(Toast(title="Success", description=description))
        logger.info("Toast: %s", description)

    def error(self, description: str) -> None:
        self.toasts.append(Toast(title="Error", description=description, variant="destructive"))

    def drain(self) -> list[Toast]:
        toasts, self.toasts = self.toasts, []
        return toasts


# Tile gradients by article color. Anything else gets FALLBACK_GRADIENT.
GRADIENTS: dict[str, str] = {
    "blue": "bg-gradient-to-br from-blue-500 to-purple-600",
    "red": "bg-gradient-to-br from-red-500 to-orange-600",
    "green": "bg-gradient-to-br from-green-500 to-teal-600",
    "yellow": "bg-gradient-to-br from-yellow-500 to-amber-600",
    "purple": "bg-gradient-to-br from-purple-500 to-indigo-600",
    "pink": "bg-gradient-to-br from-pink-500 to-rose-600",
    "teal": "bg-gradient-to-br from-teal-500 to-cyan-600",
    "orange": "bg-gradient-to-br from-orange-500 to-amber-600",
    "indigo": "bg-gradient-to-br from-indigo-500 to-blue-600",
    "cyan": "bg-gradient-to-br from-cyan-500 to-sky-600",
}
FALLBACK_GRADIENT = "bg-gradient-to-br from-slate-500 to-gray-600"


def theme_for(color: str | None) -> str:
    """Return the tile gradient for ``color``, falling back for unknown values."""
    return GRADIENTS.get(color or "", FALLBACK_GRADIENT)
