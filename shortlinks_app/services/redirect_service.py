import logging

from shortlinks_app.services.errors import BadRequestError, InternalError, NotFoundError
from shortlinks_app.storage.exceptions import StorageError
from shortlinks_app.storage.link_store import LinkStore

logger = logging.getLogger(__name__)


class RedirectService:
    """Resolves short codes to their destination and counts the visit."""

    def __init__(self, store: LinkStore):
        self.store = store

    def resolve(self, short_code: str) -> str:
        """
        Get the original URL for a short code.
        
        Flow:
        1. Look up the link (NotFound if absent)
        2. Add one to its click count, best effort
        3. Return the original URL for the caller to redirect to
        
        A failed click increment is logged and ignored: the visitor
        still gets redirected.
        """
        if not short_code or not short_code.strip():
            raise BadRequestError("Short code not provided")

        try:
            link = self.store.find_by_code(short_code)
        except StorageError as e:
            raise InternalError("Could not resolve the short link") from e

        if not link:
            raise NotFoundError("Short link not found")

        try:
            self.store.increment_clicks(link.id)
        except StorageError:
            logger.warning("Could not count click for %s", short_code, exc_info=True)

        return link.original_url
