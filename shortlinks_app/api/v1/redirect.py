from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from shortlinks_app.schemas.link import ErrorResponse
from shortlinks_app.services.redirect_service import RedirectService
from shortlinks_app.dependencies import get_redirect_service

router = APIRouter(tags=["redirect"])


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def redirect_to_original_url(
    short_code: str,
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """
    Redirect to the original URL.
    
    The click is counted before redirecting; if counting fails the
    redirect still happens. Unknown codes get a 404.
    """
    target_url = redirect_service.resolve(short_code)
    return RedirectResponse(url=target_url, status_code=status.HTTP_302_FOUND)
