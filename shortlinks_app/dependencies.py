"""
FastAPI dependencies for dependency injection.

The link store and the services are stateless, so each is built once per
process (``@lru_cache``) and shared by every request. Tests swap the store
through ``app.dependency_overrides[get_link_store]``; the services below are
cached per store instance, so overriding the store is enough.
"""

from functools import lru_cache

from fastapi import Depends

from shortlinks_app.config import settings
from shortlinks_app.database.connection import SessionLocal
from shortlinks_app.services.link_service import LinkService
from shortlinks_app.services.redirect_service import RedirectService
from shortlinks_app.services.short_code_strategies import ShortCodeStrategy, RandomShortCodeStrategy
from shortlinks_app.storage.link_store import LinkStore


@lru_cache()
def get_link_store() -> LinkStore:
    """Link store bound to the application's session factory (singleton)."""
    return LinkStore(SessionLocal)


@lru_cache()
def get_short_code_strategy() -> ShortCodeStrategy:
    """Random code strategy sized from settings (singleton)."""
    return RandomShortCodeStrategy(length=settings.short_code_length)


@lru_cache()
def get_link_service(
    store: LinkStore = Depends(get_link_store),
    code_strategy: ShortCodeStrategy = Depends(get_short_code_strategy),
) -> LinkService:
    """
    Get LinkService with its store and code strategy injected.
    
    Controllers depend on the service; the service depends on storage.
    """
    return LinkService(
        store=store,
        code_strategy=code_strategy,
        max_attempts=settings.max_code_attempts,
        custom_code_min_length=settings.custom_code_min_length,
        custom_code_max_length=settings.custom_code_max_length,
    )


@lru_cache()
def get_redirect_service(store: LinkStore = Depends(get_link_store)) -> RedirectService:
    return RedirectService(store=store)
