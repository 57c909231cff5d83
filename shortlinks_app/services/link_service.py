import logging
from typing import List, Optional

from shortlinks_app.models.link import Link
from shortlinks_app.services.errors import (
    BadRequestError,
    ConflictError,
    InternalError,
    LinkServiceError,
    NotFoundError,
)
from shortlinks_app.services.short_code_strategies import ShortCodeStrategy
from shortlinks_app.services.validators import validate_original_url, validate_short_code
from shortlinks_app.storage.exceptions import DuplicateLinkError, StorageError
from shortlinks_app.storage.link_store import LinkStore

logger = logging.getLogger(__name__)


class LinkService:
    """
    Creates and lists short links.
    
    The store and code strategy are injected, and the service keeps no
    per-request state, so one instance serves the whole process.
    
    Uniqueness is checked twice: a lookup before the insert gives a clear
    error in the common case, and the database's unique constraints settle
    the rare race between two concurrent requests.
    """
    
    def __init__(
        self,
        store: LinkStore,
        code_strategy: ShortCodeStrategy,
        max_attempts: int = 3,
        custom_code_min_length: int = 3,
        custom_code_max_length: int = 10,
    ):
        """
        Args:
            store: Link store
            code_strategy: Generates candidate codes when none is supplied
            max_attempts: Generated candidates to try before giving up
            custom_code_min_length: Shortest accepted custom code
            custom_code_max_length: Longest accepted custom code
        """
        self.store = store
        self.code_strategy = code_strategy
        self.max_attempts = max_attempts
        self.custom_code_min_length = custom_code_min_length
        self.custom_code_max_length = custom_code_max_length

    def create_link(self, original_url: str, custom_code: Optional[str] = None) -> Link:
        """Create a new short link
        
        Process:
        1. Validate the URL and, if given, the custom code
        2. Reject a URL that is already shortened (Conflict, with its code)
        3. Take the custom code if free, else generate one
        4. Insert; a unique-constraint hit maps to the same errors as step 2/3
        
        Returns the SQLAlchemy model instance.
        """
        original_url = validate_original_url(original_url)
        is_custom = custom_code is not None
        if is_custom:
            validate_short_code(
                custom_code,
                min_length=self.custom_code_min_length,
                max_length=self.custom_code_max_length,
            )

        try:
            existing = self.store.find_by_url(original_url)
            if existing:
                raise ConflictError(
                    f"This URL is already shortened as '{existing.short_code}'",
                    short_code=existing.short_code,
                )

            if is_custom:
                if self.store.find_by_code(custom_code):
                    raise BadRequestError(
                        "This custom code is already in use. Choose a different one."
                    )
                short_code = custom_code
            else:
                short_code = self._generate_unique_code()

            link = self.store.insert(original_url, short_code, is_custom=is_custom)
        except DuplicateLinkError as e:
            raise self._race_error(e, original_url) from e
        except StorageError as e:
            logger.error("Storage failure creating link for %s: %s", original_url, e)
            raise InternalError("Could not create the link") from e

        logger.info("Created link %s -> %s (custom=%s)", link.short_code, link.original_url, is_custom)
        return link

    def list_links(self) -> List[Link]:
        """All links, oldest first"""
        try:
            return self.store.list_all()
        except StorageError as e:
            raise InternalError("Could not fetch links") from e

    def get_link(self, short_code: str) -> Link:
        """Get one link by code, including its current click count"""
        try:
            link = self.store.find_by_code(short_code)
        except StorageError as e:
            raise InternalError("Could not fetch the link") from e
        if not link:
            raise NotFoundError("Short link not found")
        return link

    def _generate_unique_code(self) -> str:
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.code_strategy.generate()
            if not self.store.find_by_code(candidate):
                return candidate
            logger.warning("Generated code %s already taken (attempt %d/%d)",
                           candidate, attempt, self.max_attempts)

        raise InternalError(
            f"Could not allocate a unique code after {self.max_attempts} attempts"
        )

    def _race_error(self, error: DuplicateLinkError, original_url: str) -> LinkServiceError:
        # Another request won between our lookup and our insert
        logger.warning("Unique constraint on %s hit while inserting %s", error.field, original_url)
        if error.field == "original_url":
            existing = None
            try:
                existing = self.store.find_by_url(original_url)
            except StorageError as e:
                logger.error("Could not look up the winning link for %s: %s", original_url, e)
            if existing:
                return ConflictError(
                    f"This URL is already shortened as '{existing.short_code}'",
                    short_code=existing.short_code,
                )
            return ConflictError("This URL is already shortened")
        return BadRequestError("This code is already in use. Choose a different one.")
