from typing import Protocol


class Notifier(Protocol):
    """Transient user-facing notifications (toasts)."""
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...
