from typing import List

from fastapi import APIRouter, Depends
from shortlink_app.schemas.link import CounterLinkStatistics, LinkResponse, LinkTarget
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(prefix="/links", tags=["links"])


@router.post("", response_model=LinkResponse)
async def create_link(
    new_link: LinkTarget,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a new short link (409 if targetUrl is not an absolute URL)"""
    return await link_service.create_link(new_link.target_url)


@router.api_route("/{link_id}", methods=["PUT", "PATCH"], response_model=LinkResponse)
async def update_link(
    link_id: str,
    update: LinkTarget,
    link_service: LinkService = Depends(get_link_service)
):
    """Point an existing link at a new URL"""
    return await link_service.update_link(link_id, update.target_url)


@router.get("/{link_id}/statistics", response_model=List[CounterLinkStatistics])
async def get_link_statistics(
    link_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Redirect counts per (referer, user agent); empty for unknown links"""
    return await link_service.get_link_statistics(link_id)
