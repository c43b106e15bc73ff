"""Recording Navigator for testing."""


class FakeNavigator:
    def __init__(self):
        self.redirects: list[str] = []

    def redirect(self, location: str) -> None:
        self.redirects.append(location)

    @property
    def last(self) -> str | None:
        return self.redirects[-1] if self.redirects else None
