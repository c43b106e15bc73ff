"""Navigation bar rendered on every page.

Not gated: it shows a spinner while the session loads, the avatar when
signed in and a Sign Up link otherwise.
"""

from client.gate import PROFILE_ROUTE, SIGNUP_ROUTE
from client.hydration import HydrationEffect
from client.pages import NavBarPage
from client.session import SessionStore
from client.user_cache import UserDataCache
from domain.model.profile import UserRecord, resolve_avatar


class NavBarView:
    def __init__(self, store: SessionStore, cache: UserDataCache):
        self.store = store
        self.user = UserRecord.empty()
        self.hydration = HydrationEffect(store, cache, self._set_user, owner="navbar")

    def mount(self) -> None:
        self.hydration.start()

    def unmount(self) -> None:
        self.hydration.stop()

    def _set_user(self, record: UserRecord) -> None:
        self.user = record

    def render(self) -> NavBarPage:
        session = self.store.session
        if session.is_loading:
            return NavBarPage(spinner=True)
        if session.is_authenticated:
            return NavBarPage(
                avatar=resolve_avatar(session.user, self.user),
                avatar_alt=f"profile {self.user.first_name}",
                link=PROFILE_ROUTE,
            )
        return NavBarPage(link=SIGNUP_ROUTE, link_label="Sign Up")
