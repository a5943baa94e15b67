"""
CLI startup tests. uvicorn is never actually started.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from lanshare.api.deps import get_settings
from lanshare.app_shell import cli


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Let the CLI write LANSHARE_* vars; monkeypatch restores them afterwards."""
    for var in ("LANSHARE_UPLOADS_DIR", "LANSHARE_HOST", "LANSHARE_PORT", "LANSHARE_RULES_PATH"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_share_base_urls() -> None:
    with patch.object(
        cli.InterfaceAddressSource,
        "list_lan_addresses",
        return_value=["192.168.1.5", "10.0.0.2"],
    ):
        urls = cli.share_base_urls(27149)

    assert urls == ["http://192.168.1.5:27149/", "http://10.0.0.2:27149/"]


def test_main_starts_uvicorn_with_overrides(tmp_path: Path) -> None:
    with (
        patch.object(cli.InterfaceAddressSource, "list_lan_addresses", return_value=[]),
        patch.object(cli.uvicorn, "run") as run,
    ):
        cli.main(
            [
                "--port",
                "8080",
                "--host",
                "127.0.0.1",
                "--uploads-dir",
                str(tmp_path / "shared"),
                "--rules",
                str(tmp_path / "missing.yaml"),
            ]
        )

    run.assert_called_once()
    assert run.call_args.kwargs["host"] == "127.0.0.1"
    assert run.call_args.kwargs["port"] == 8080

    settings = get_settings()
    assert settings.uploads_dir == (tmp_path / "shared").resolve()
    assert settings.port == 8080


def test_main_exits_on_invalid_rules(tmp_path: Path) -> None:
    rules = tmp_path / "rules.yaml"
    rules.write_text("qrcodes:\n  error_correction: Z\n")

    with patch.object(cli.uvicorn, "run") as run, pytest.raises(SystemExit):
        cli.main(["--rules", str(rules)])

    run.assert_not_called()
