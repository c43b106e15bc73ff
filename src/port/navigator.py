from typing import Protocol


class Navigator(Protocol):
    def redirect(self, location: str) -> None: ...
