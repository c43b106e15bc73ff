"""Recording Notifier for testing."""


class FakeNotifier:
    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(('success', message))

    def error(self, message: str) -> None:
        self.messages.append(('error', message))
