"""What a view renders.

Views return one of these immutable descriptions instead of markup.
"""

from dataclasses import dataclass, field

from domain.model.profile import ProfileCard


@dataclass(frozen=True)
class LoadingScreen:
    """Placeholder shown while the session resolves."""


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class PostCard:
    id: int
    author: str
    profile_pic: str
    title: str
    content: str
    date: str
    views: int


@dataclass(frozen=True)
class ProfilePage:
    card: ProfileCard
    posts: tuple[PostCard, ...] = ()


@dataclass(frozen=True)
class NavBarPage:
    brand: str = "LR Blog"
    home_link: str = "/"
    spinner: bool = False
    avatar: str | None = None
    avatar_alt: str | None = None
    link: str | None = None
    link_label: str | None = None


@dataclass(frozen=True)
class SignUpPage:
    values: dict[str, str]
    errors: dict[str, str] = field(default_factory=dict)
    submit_label: str = "Sign Up"
    submit_disabled: bool = False
    signin_link: str = "/signin"


@dataclass(frozen=True)
class WriteArticlePage:
    heading: str = "New Article"
