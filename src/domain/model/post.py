from dataclasses import dataclass


@dataclass(frozen=True)
class Post:
    """A blog post shown on the profile page."""
    id: int
    title: str
    content: str
    date: str
    views: int


# Fixed sample data; nothing creates or mutates posts yet.
SAMPLE_POSTS: tuple[Post, ...] = (
    Post(
        id=1,
        title="Getting started with the LR Blog",
        content="A quick tour of writing, publishing and sharing your first article.",
        date="2023-07-12",
        views=1204,
    ),
    Post(
        id=2,
        title="Designing a calm reading experience",
        content="Typography, spacing and colour choices that keep long reads comfortable.",
        date="2023-07-28",
        views=865,
    ),
    Post(
        id=3,
        title="Notes on session handling in web apps",
        content="Why every gated page needs a loading state, a redirect and real content.",
        date="2023-08-09",
        views=432,
    ),
)
