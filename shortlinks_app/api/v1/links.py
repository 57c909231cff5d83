from typing import List

from fastapi import APIRouter, Depends, status
from shortlinks_app.schemas.link import ErrorResponse, LinkCreate, LinkResponse, LinkSummary
from shortlinks_app.services.link_service import LinkService
from shortlinks_app.dependencies import get_link_service

router = APIRouter(prefix="/links", tags=["links"])


@router.post(
    "/",
    response_model=LinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def create_link(
    link_data: LinkCreate,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a new short link, optionally with a custom code"""
    return link_service.create_link(link_data.original_url, link_data.short_code)


@router.get("/", response_model=List[LinkSummary])
def list_links(link_service: LinkService = Depends(get_link_service)):
    """List all links in creation order"""
    return link_service.list_links()


@router.get("/{short_code}", response_model=LinkResponse, responses={404: {"model": ErrorResponse}})
def get_link_info(
    short_code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Get information about a short link, including its click count"""
    return link_service.get_link(short_code)
