from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

DEFAULT_CACHE_CONTROL_HEADER_VALUE = (
    "public, max-age=300, s-maxage=300, "
    "state-while-revalidate=300, stale-if-error=300"
)

router = APIRouter(tags=["redirect"])


def header_text(request: Request, name: str) -> Optional[str]:
    """
    Read a header as text.

    Returns None when the header is absent and "" when its value holds
    anything other than visible ASCII or tab. Starlette decodes header
    bytes as latin-1, so every byte maps to exactly one character here.
    """
    value = request.headers.get(name)
    if value is None:
        return None
    if all(char == "\t" or " " <= char <= "~" for char in value):
        return value
    return ""


@router.get("/{link_id}")
async def redirect(
    link_id: str,
    request: Request,
    link_service: LinkService = Depends(get_link_service)
):
    """
    Redirect to the link's target URL.

    Flow:
    1. Look up the target (404 if the link does not exist)
    2. Record the click, bounded by the database timeout; a failed or slow
       write is logged and does not affect the response
    3. Answer 307 with a cacheable Location
    """
    target_url = await link_service.get_target_url(link_id)

    await link_service.record_click(
        link_id,
        referer=header_text(request, "referer"),
        user_agent=header_text(request, "user-agent"),
    )

    # Location is sent exactly as stored; it is already normalized
    return Response(
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        headers={
            "Location": target_url,
            "Cache-Control": DEFAULT_CACHE_CONTROL_HEADER_VALUE,
        },
    )
