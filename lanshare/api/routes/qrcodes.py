"""
QR code route.

GET /api/v1/qrcodes?content=<url> renders ``content`` as a PNG QR code.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from lanshare.api.deps import get_qr_encoder
from lanshare.components.sharing import EncodeQrInput, run_encode_qr
from lanshare.core.ports import QrEncoderPort

router = APIRouter()


@router.get(
    "",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "QR code image"},
        400: {"description": "Missing or empty content"},
        500: {"description": "Content could not be encoded"},
    },
    summary="Render a QR code",
)
def get_qrcode(
    content: str = Query("", description="Text to encode, usually a share link"),
    encoder: QrEncoderPort = Depends(get_qr_encoder),
) -> Response:
    result = run_encode_qr(EncodeQrInput(content=content), encoder=encoder)

    if not result.success:
        err = result.errors[0]
        status_code = 400 if err.code == "content_required" else 500
        raise HTTPException(status_code=status_code, detail=err.message)

    return Response(content=result.png, media_type="image/png")
