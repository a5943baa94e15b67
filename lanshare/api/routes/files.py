"""
File sharing route.

POST /api/v1/files stores the multipart part ``raw`` and returns its
download path. Only the extension of the original file name is kept.
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from lanshare.api.deps import UploadRulesAdapter, get_content_store, get_upload_rules
from lanshare.api.schemas import ErrorResponse, UploadResponse
from lanshare.components.sharing import UploadFileInput, run_upload_file
from lanshare.core.ports import ContentStorePort

router = APIRouter()


@router.post(
    "",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing file part"},
        413: {"model": ErrorResponse, "description": "File too large"},
    },
    summary="Share a file",
)
def upload_file(
    raw: UploadFile = File(...),
    store: ContentStorePort = Depends(get_content_store),
    rules: UploadRulesAdapter = Depends(get_upload_rules),
) -> UploadResponse:
    """Store the uploaded file and return ``/uploads/<id><ext>``."""
    inp = UploadFileInput(filename=raw.filename, data=raw.file, size_bytes=raw.size)

    result = run_upload_file(inp, store=store, rules=rules)

    if not result.success:
        err = result.errors[0]
        status_code = 413 if err.code == "too_large" else 400
        raise HTTPException(status_code=status_code, detail=err.message)

    return UploadResponse(url=result.url)
