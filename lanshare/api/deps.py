import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from lanshare.adapters.fs.uploads import UploadsDirectoryStore
from lanshare.adapters.net.interfaces import InterfaceAddressSource
from lanshare.adapters.qr.png import QrPngEncoder
from lanshare.rules.loader import load_rules_or_default
from lanshare.rules.models import Rules

DEFAULT_PORT = 27149


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.uploads_dir = Path(
            os.environ.get("LANSHARE_UPLOADS_DIR", str(self.base_dir / "uploads"))
        )
        self.host = os.environ.get("LANSHARE_HOST", "0.0.0.0")
        self.port = int(os.environ.get("LANSHARE_PORT", str(DEFAULT_PORT)))
        self.rules_path = Path(
            os.environ.get("LANSHARE_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules_or_default(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


class UploadRulesAdapter:
    """Adapter to map generic Rules to the sharing component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.uploads

    def get_max_upload_bytes(self) -> int:
        return self._rules.max_upload_bytes


def get_upload_rules(rules: Rules = Depends(get_rules)) -> UploadRulesAdapter:
    return UploadRulesAdapter(rules)


# --- Adapters ---
def get_content_store(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> UploadsDirectoryStore:
    return UploadsDirectoryStore(
        settings.uploads_dir,
        text_extension=rules.uploads.text_extension,
    )


def get_address_source() -> InterfaceAddressSource:
    return InterfaceAddressSource()


def get_qr_encoder(rules: Rules = Depends(get_rules)) -> QrPngEncoder:
    return QrPngEncoder(
        size_px=rules.qrcodes.size_px,
        error_correction=rules.qrcodes.error_correction,
        border=rules.qrcodes.border,
    )
