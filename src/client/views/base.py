"""Common shape of a gated view."""

from client.gate import GateOutcome, GatePolicy, evaluate
from client.pages import LoadingScreen, Redirect
from client.session import SessionStore
from domain.model.session import Session
from port.navigator import Navigator


class GatedView:
    """Applies the session gate before rendering content.

    Subclasses set ``policy`` and implement ``render_content``. ``mount``
    and ``unmount`` bracket the view's lifetime.
    """

    policy: GatePolicy = GatePolicy.REQUIRE_AUTHENTICATED

    def __init__(self, store: SessionStore, navigator: Navigator):
        self.store = store
        self.navigator = navigator
        self.mounted = False

    def mount(self) -> None:
        self.mounted = True

    def unmount(self) -> None:
        self.mounted = False

    def render(self):
        session = self.store.session
        decision = evaluate(session, self.policy)
        if decision.outcome == GateOutcome.LOADING:
            return LoadingScreen()
        if decision.outcome == GateOutcome.REDIRECT:
            self.navigator.redirect(decision.location)
            return Redirect(decision.location)
        return self.render_content(session)

    def render_content(self, session: Session):
        raise NotImplementedError
