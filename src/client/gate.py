"""Session gate shared by every gated view.

loading → placeholder, wrong session → redirect, otherwise content.
Redirects are fixed per policy and never remember where the caller came
from.
"""

from dataclasses import dataclass
from enum import Enum

from domain.model.session import Session, SessionStatus

SIGNIN_ROUTE = "/signin"
SIGNUP_ROUTE = "/signup"
PROFILE_ROUTE = "/profile"


class GatePolicy(str, Enum):
    REQUIRE_AUTHENTICATED = 'require_authenticated'
    REQUIRE_ANONYMOUS = 'require_anonymous'


class GateOutcome(str, Enum):
    LOADING = 'loading'
    REDIRECT = 'redirect'
    CONTENT = 'content'


@dataclass(frozen=True)
class GateDecision:
    outcome: GateOutcome
    location: str | None = None


def evaluate(session: Session, policy: GatePolicy) -> GateDecision:
    if session.status == SessionStatus.LOADING:
        return GateDecision(GateOutcome.LOADING)

    if policy == GatePolicy.REQUIRE_AUTHENTICATED and not session.is_authenticated:
        return GateDecision(GateOutcome.REDIRECT, SIGNIN_ROUTE)
    if policy == GatePolicy.REQUIRE_ANONYMOUS and session.is_authenticated:
        return GateDecision(GateOutcome.REDIRECT, PROFILE_ROUTE)

    return GateDecision(GateOutcome.CONTENT)
