import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

Variant = Literal["default", "destructive"]

@dataclass(frozen=True)
class Toast:
    title: str
    description: str = ""
    variant: Variant = "default"

class Notifier:
    """Collects transient user-visible notifications (toasts)."""

    def __init__(self):
        self.toasts: list[Toast] = []

    def notify(self, title: str, description: str = "", variant: Variant = "default") -> Toast:
        toast = Toast(title, description, variant)
        self.toasts.append(toast)
        log = logger.warning if variant == "destructive" else logger.info
        log("toast: %s - %s", title, description)
        return toast

    def error(self, title: str, description: str = "") -> Toast:
        return self.notify(title, description, variant="destructive")

    @property
    def last(self) -> Toast | None:
        return self.toasts[-1] if self.toasts else None

    def clear(self) -> None:
        self.toasts.clear()
