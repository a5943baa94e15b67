"""
Stored item download route.

GET /uploads/{name} streams a stored item as an attachment.

Headers:
- Content-Disposition: attachment; filename=<name>
  (quoted, plus an RFC 5987 filename* form, when the name is not a plain token)
- Content-Type: application/octet-stream
- Content-Length: size of the stored file
"""

import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from lanshare.api.deps import get_content_store
from lanshare.components.sharing import ResolveInput, run_resolve
from lanshare.core.ports import ContentStorePort

router = APIRouter()

_TOKEN_NAME = re.compile(r"^[A-Za-z0-9._-]+$")


def build_content_disposition(name: str) -> str:
    """
    Build an attachment Content-Disposition header for ``name``.

    Generated names are plain tokens and are sent as-is. Anything else gets
    a quoted ASCII fallback and the exact UTF-8 name in ``filename*``, since
    header values must be Latin-1.
    """
    if _TOKEN_NAME.match(name):
        return f"attachment; filename={name}"

    fallback = re.sub(r"[^\x20-\x7e]", "_", name)
    fallback = fallback.replace("\\", "\\\\").replace('"', '\\"')
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(name, safe='')}"


def build_download_headers(name: str) -> dict[str, str]:
    """Headers that make browsers save the item instead of rendering it."""
    return {
        "Content-Description": "File Transfer",
        "Content-Transfer-Encoding": "binary",
        "Content-Disposition": build_content_disposition(name),
    }


@router.get(
    "/{name}",
    responses={
        200: {"description": "Stored item bytes"},
        404: {"description": "Item not found or name invalid"},
    },
    summary="Download a stored item",
)
def download(
    name: str,
    store: ContentStorePort = Depends(get_content_store),
) -> FileResponse:
    result = run_resolve(ResolveInput(name=name), store=store)

    if not result.success or result.item is None:
        raise HTTPException(status_code=404, detail="Not found")

    return FileResponse(
        result.item.path,
        media_type="application/octet-stream",
        headers=build_download_headers(result.item.name),
    )
