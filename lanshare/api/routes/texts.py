"""
Text sharing route.

POST /api/v1/texts stores a text blob and returns its download path.
"""

from fastapi import APIRouter, Depends, HTTPException

from lanshare.api.deps import UploadRulesAdapter, get_content_store, get_upload_rules
from lanshare.api.schemas import ErrorResponse, TextUploadRequest, UploadResponse
from lanshare.components.sharing import UploadTextInput, run_upload_text
from lanshare.core.ports import ContentStorePort

router = APIRouter()


@router.post(
    "",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed body"},
        413: {"model": ErrorResponse, "description": "Text too large"},
    },
    summary="Share text",
)
def upload_text(
    request: TextUploadRequest,
    store: ContentStorePort = Depends(get_content_store),
    rules: UploadRulesAdapter = Depends(get_upload_rules),
) -> UploadResponse:
    """Store the text and return ``/uploads/<id>.txt``."""
    result = run_upload_text(UploadTextInput(raw=request.raw), store=store, rules=rules)

    if not result.success:
        err = result.errors[0]
        status_code = 413 if err.code == "too_large" else 400
        raise HTTPException(status_code=status_code, detail=err.message)

    return UploadResponse(url=result.url)
