"""
Sharing component - upload, download, address listing and QR rendering.

Orchestrates the content store, address source and QR encoder for each
request. Every entry point is independent; there is no cross-request state.

Invariants:
- I1: Invalid input never mutates the store
- I2: Download names are validated before any filesystem access
- I3: Empty QR content is rejected before reaching the encoder

StorageError is not converted here; it propagates to the HTTP layer.
"""

from __future__ import annotations

import logging

from lanshare.core.ports.qrcode import QrEncodingError
from lanshare.core.ports.storage import InvalidNameError, ItemNotFoundError

from .links import compose_links
from .models import (
    AddressListOutput,
    ComposeLinksInput,
    EncodeQrInput,
    LinkListOutput,
    QrOutput,
    ResolveInput,
    ResolveOutput,
    ShareValidationError,
    UploadFileInput,
    UploadOutput,
    UploadTextInput,
)
from .ports import AddressSourcePort, ContentStorePort, QrEncoderPort, RulesPort

logger = logging.getLogger(__name__)


# --- Validation Functions ---


def validate_size(size: int | None, rules: RulesPort | None) -> list[ShareValidationError]:
    """
    Validate upload size against the configured limit.

    Unknown sizes (None) and a missing rules port are not checked.
    """
    errors: list[ShareValidationError] = []

    if size is None or rules is None:
        return errors

    max_size = rules.get_max_upload_bytes()
    if size > max_size:
        errors.append(
            ShareValidationError(
                code="too_large",
                message=f"Upload size {size} bytes exceeds maximum of {max_size} bytes",
                field="raw",
            )
        )

    return errors


# --- Component Entry Points ---


def run_upload_text(
    inp: UploadTextInput,
    *,
    store: ContentStorePort,
    rules: RulesPort | None = None,
) -> UploadOutput:
    """
    Store a text blob and return its download path.

    Args:
        inp: Input containing the raw text.
        store: Content store port.
        rules: Optional rules port for size limits.

    Returns:
        UploadOutput with the stored item and its ``/uploads/...`` url.
    """
    errors = validate_size(len(inp.raw.encode("utf-8")), rules)
    if errors:
        return UploadOutput(errors=errors, success=False)

    item = store.put_text(inp.raw)
    return UploadOutput(item=item, url=item.url_path)


def run_upload_file(
    inp: UploadFileInput,
    *,
    store: ContentStorePort,
    rules: RulesPort | None = None,
) -> UploadOutput:
    """
    Store an uploaded file and return its download path.

    The original file name is discarded; only its extension is kept.
    """
    if not inp.filename:
        return UploadOutput(
            errors=[
                ShareValidationError(
                    code="file_required",
                    message="A file part named 'raw' is required",
                    field="raw",
                )
            ],
            success=False,
        )

    size = len(inp.data) if isinstance(inp.data, bytes) else inp.size_bytes
    errors = validate_size(size, rules)
    if errors:
        return UploadOutput(errors=errors, success=False)

    item = store.put_file(inp.filename, inp.data)
    return UploadOutput(item=item, url=item.url_path)


def run_resolve(inp: ResolveInput, *, store: ContentStorePort) -> ResolveOutput:
    """Resolve a download name to a stored file."""
    try:
        item = store.resolve(inp.name)
    except InvalidNameError as e:
        logger.warning("Rejected download name %r: %s", inp.name, e.reason)
        return _not_found(inp.name)
    except ItemNotFoundError:
        return _not_found(inp.name)

    return ResolveOutput(item=item)


def _not_found(name: str) -> ResolveOutput:
    return ResolveOutput(
        errors=[
            ShareValidationError(
                code="not_found",
                message=f"Stored item {name} not found",
                field="name",
            )
        ],
        success=False,
    )


def run_list_addresses(*, addresses: AddressSourcePort) -> AddressListOutput:
    """List the host's LAN addresses at call time."""
    return AddressListOutput(addresses=addresses.list_lan_addresses())


def run_compose_links(
    inp: ComposeLinksInput,
    *,
    addresses: AddressSourcePort,
) -> LinkListOutput:
    """Build a share link for every current LAN address."""
    if not inp.relative_path.strip("/"):
        return LinkListOutput(
            links=[],
            errors=[
                ShareValidationError(
                    code="path_required",
                    message="A download path is required",
                    field="path",
                )
            ],
            success=False,
        )

    links = compose_links(addresses.list_lan_addresses(), inp.port, inp.relative_path)
    return LinkListOutput(links=links)


def run_encode_qr(inp: EncodeQrInput, *, encoder: QrEncoderPort) -> QrOutput:
    """
    Render content as a QR PNG.

    Empty content is a client error and never reaches the encoder.
    """
    if not inp.content:
        return QrOutput(
            errors=[
                ShareValidationError(
                    code="content_required",
                    message="Query parameter 'content' is required",
                    field="content",
                )
            ],
            success=False,
        )

    try:
        png = encoder.encode(inp.content)
    except QrEncodingError as e:
        logger.warning("QR encoding failed for %d chars: %s", len(inp.content), e)
        return QrOutput(
            errors=[ShareValidationError(code="encoding_failed", message=str(e), field="content")],
            success=False,
        )

    return QrOutput(png=png)
