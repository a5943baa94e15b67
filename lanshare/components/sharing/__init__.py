"""
Sharing component - text/file upload, download resolution, LAN links and QR codes.
"""

from .component import (
    run_compose_links,
    run_encode_qr,
    run_list_addresses,
    run_resolve,
    run_upload_file,
    run_upload_text,
    validate_size,
)
from .links import compose_link, compose_links
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

__all__ = [
    # Entry points
    "run_compose_links",
    "run_encode_qr",
    "run_list_addresses",
    "run_resolve",
    "run_upload_file",
    "run_upload_text",
    # Helper functions
    "compose_link",
    "compose_links",
    "validate_size",
    # Input models
    "ComposeLinksInput",
    "EncodeQrInput",
    "ResolveInput",
    "UploadFileInput",
    "UploadTextInput",
    # Output models
    "AddressListOutput",
    "LinkListOutput",
    "QrOutput",
    "ResolveOutput",
    "ShareValidationError",
    "UploadOutput",
    # Ports
    "AddressSourcePort",
    "ContentStorePort",
    "QrEncoderPort",
    "RulesPort",
]
