"""Navigator and Notifier that report through logging.

Used when the client runs headless (scripts, smoke checks) where there is
no router or toast container to drive.
"""

import logging

logger = logging.getLogger(__name__)


class LoggingNavigator:
    def __init__(self):
        self.location = "/"

    def redirect(self, location: str) -> None:
        if location != self.location:
            logger.info("Redirect", extra={"from": self.location, "to": location})
        self.location = location


class LoggingNotifier:
    def success(self, message: str) -> None:
        logger.info(message, extra={"toast": "success"})

    def error(self, message: str) -> None:
        logger.warning(message, extra={"toast": "error"})
