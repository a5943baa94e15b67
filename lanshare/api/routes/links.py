"""
Share link route.

GET /api/v1/links?path=/uploads/<name> returns one absolute share URL per
LAN address, using the port this request arrived on.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from lanshare.api.deps import Settings, get_address_source, get_settings
from lanshare.api.schemas import ErrorResponse, LinksResponse
from lanshare.components.sharing import ComposeLinksInput, run_compose_links
from lanshare.core.ports import AddressSourcePort

router = APIRouter()


@router.get(
    "",
    response_model=LinksResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing path"}},
    summary="Compose share links",
)
def compose_share_links(
    request: Request,
    path: str = Query("", description="Download path returned by an upload"),
    addresses: AddressSourcePort = Depends(get_address_source),
    settings: Settings = Depends(get_settings),
) -> LinksResponse:
    port = request.url.port or settings.port
    result = run_compose_links(
        ComposeLinksInput(relative_path=path, port=port),
        addresses=addresses,
    )

    if not result.success:
        raise HTTPException(status_code=400, detail=result.errors[0].message)

    return LinksResponse(links=result.links)
