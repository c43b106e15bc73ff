from client.pages import WriteArticlePage
from client.views.base import GatedView
from domain.model.session import Session


class WriteArticleView(GatedView):
    """Article editor entry point. Only the session gate so far."""

    def render_content(self, session: Session) -> WriteArticlePage:
        return WriteArticlePage()
