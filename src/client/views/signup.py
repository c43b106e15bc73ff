"""Signup page.

Only reachable without a session (signed-in users go to /profile). The
form validates on touch; submission is blocked while the form is invalid
or a submission is already running. The server's ``message`` is shown
verbatim, styled by whether the response was a success.
"""

import logging

from adapter.external.signup_client import SignupClient
from client.forms import empty_values, validate_signup
from client.gate import GatePolicy
from client.pages import SignUpPage
from client.session import SessionStore
from client.views.base import GatedView
from domain.model.session import Session
from port.navigator import Navigator
from port.notifier import Notifier

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Sign Up"
SUBMITTING_LABEL = "Signing Up..."


class SignUpView(GatedView):
    policy = GatePolicy.REQUIRE_ANONYMOUS

    def __init__(
        self,
        store: SessionStore,
        navigator: Navigator,
        notifier: Notifier,
        client: SignupClient,
    ):
        super().__init__(store, navigator)
        self.notifier = notifier
        self.client = client
        self.values = empty_values()
        self.errors: dict[str, str] = {}
        self.is_submitting = False

    @property
    def is_valid(self) -> bool:
        _, errors = validate_signup(self.values)
        return not errors

    def update(self, field: str, value: str) -> None:
        """Set a field and re-check it (validation on touch)."""
        if field not in self.values:
            raise KeyError(field)
        self.values[field] = value
        _, errors = validate_signup(self.values)
        if field in errors:
            self.errors[field] = errors[field]
        else:
            self.errors.pop(field, None)

    def reset(self) -> None:
        self.values = empty_values()
        self.errors = {}

    async def submit(self, values: dict[str, str] | None = None) -> bool:
        """Validate and POST the form. Returns True when the server accepted it.

        Ignored entirely, ``values`` included, while a submission is running.
        """
        if self.is_submitting:
            return False

        if values:
            for field, value in values.items():
                if field in self.values:
                    self.values[field] = value

        form, errors = validate_signup(self.values)
        if form is None:
            self.errors = errors
            logger.debug("Signup blocked by validation", extra={"fields": sorted(errors)})
            return False

        self.errors = {}
        self.is_submitting = True
        try:
            result = await self.client.submit(form.to_payload())
        finally:
            self.is_submitting = False

        if result.ok:
            self.notifier.success(result.message)
            self.reset()
        else:
            self.notifier.error(result.message)
        return result.ok

    def render_content(self, session: Session) -> SignUpPage:
        return SignUpPage(
            values=dict(self.values),
            errors=dict(self.errors),
            submit_label=SUBMITTING_LABEL if self.is_submitting else SUBMIT_LABEL,
            submit_disabled=self.is_submitting or not self.is_valid,
        )
