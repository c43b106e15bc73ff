"""Profile page: session-gated, hydrated with the full user record."""

from client.hydration import HydrationEffect
from client.pages import PostCard, ProfilePage
from client.session import SessionStore
from client.user_cache import UserDataCache
from client.views.base import GatedView
from domain.model.post import SAMPLE_POSTS, Post
from domain.model.profile import UserRecord, merge_profile
from domain.model.session import Session
from port.navigator import Navigator

POST_AUTHOR = "You"


class ProfileView(GatedView):
    def __init__(
        self,
        store: SessionStore,
        cache: UserDataCache,
        navigator: Navigator,
        posts: tuple[Post, ...] = SAMPLE_POSTS,
    ):
        super().__init__(store, navigator)
        self.user = UserRecord.empty()
        self.posts = posts
        self.hydration = HydrationEffect(store, cache, self._set_user, owner="profile")

    def mount(self) -> None:
        super().mount()
        self.hydration.start()

    def unmount(self) -> None:
        self.hydration.stop()
        super().unmount()

    def _set_user(self, record: UserRecord) -> None:
        self.user = record

    def render_content(self, session: Session) -> ProfilePage:
        card = merge_profile(session.user, self.user)
        posts = tuple(
            PostCard(
                id=post.id,
                author=POST_AUTHOR,
                profile_pic=card.image,
                title=post.title,
                content=post.content,
                date=post.date,
                views=post.views,
            )
            for post in self.posts
        )
        return ProfilePage(card=card, posts=posts)
