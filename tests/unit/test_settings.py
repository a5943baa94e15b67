"""
Settings and dependency wiring tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lanshare.api.deps import (
    DEFAULT_PORT,
    Settings,
    UploadRulesAdapter,
    get_content_store,
    get_qr_encoder,
)
from lanshare.rules import QrCodeRules, Rules, UploadRules


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Without env vars, paths are relative to the working directory."""
    for var in ("LANSHARE_UPLOADS_DIR", "LANSHARE_HOST", "LANSHARE_PORT", "LANSHARE_RULES_PATH"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)

    s = Settings()

    assert s.uploads_dir == Path.cwd() / "uploads"
    assert s.rules_path == Path.cwd() / "rules.yaml"
    assert s.host == "0.0.0.0"
    assert s.port == DEFAULT_PORT == 27149


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LANSHARE_UPLOADS_DIR", str(tmp_path / "shared"))
    monkeypatch.setenv("LANSHARE_PORT", "8080")
    monkeypatch.setenv("LANSHARE_HOST", "192.168.1.5")

    s = Settings()

    assert s.uploads_dir == tmp_path / "shared"
    assert s.port == 8080
    assert s.host == "192.168.1.5"


def test_content_store_uses_settings_and_rules(tmp_path: Path) -> None:
    s = Settings()
    s.uploads_dir = tmp_path / "u"
    rules = Rules(uploads=UploadRules(text_extension=".log"))

    store = get_content_store(settings=s, rules=rules)

    assert store.root == tmp_path / "u"
    assert store.put_text("x").extension == ".log"


def test_qr_encoder_uses_rules() -> None:
    rules = Rules(qrcodes=QrCodeRules(size_px=300, error_correction="Q", border=2))

    encoder = get_qr_encoder(rules=rules)

    assert encoder.size_px == 300
    assert encoder.error_correction == "Q"
    assert encoder.border == 2


def test_upload_rules_adapter() -> None:
    adapter = UploadRulesAdapter(Rules(uploads=UploadRules(max_upload_bytes=10)))
    assert adapter.get_max_upload_bytes() == 10
