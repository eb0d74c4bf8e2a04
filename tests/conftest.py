"""Shared fixtures for bedrock_versions tests."""

from typing import Any

import pytest

_BASE = "https://www.minecraft.net/bedrockdedicatedserver"


def link(download_type: str, url: str) -> dict[str, str]:
    return {"downloadType": download_type, "downloadUrl": url}


@pytest.fixture
def links_payload() -> dict[str, Any]:
    """A links response with stable and preview builds, duplicates and noise."""
    return {
        "result": {
            "links": [
                link("serverBedrockWindows", f"{_BASE}/bin-win/bedrock-server-1.21.44.01.zip"),
                link("serverBedrockLinux", f"{_BASE}/bin-linux/bedrock-server-1.21.44.01.zip"),
                link("serverBedrockPreviewWindows", f"{_BASE}/bin-win-preview/bedrock-server-1.21.50.26.zip"),
                link("serverBedrockPreviewLinux", f"{_BASE}/bin-linux-preview/bedrock-server-1.21.50.26.zip"),
                link("serverBedrockWindows", f"{_BASE}/bin-win/bedrock-server-1.21.2.02.zip"),
                link("serverBedrockPreviewLinux", f"{_BASE}/bin-linux-preview/bedrock-server-1.21.50.24.zip"),
                link("serverJar", "https://example.com/server.jar"),
                "not a link",
            ]
        }
    }


@pytest.fixture
def preview_only_payload() -> dict[str, Any]:
    return {
        "result": {
            "links": [
                link("serverBedrockPreviewWindows", f"{_BASE}/bin-win-preview/bedrock-server-1.21.50.26.zip"),
                link("serverBedrockPreviewLinux", f"{_BASE}/bin-linux-preview/bedrock-server-1.21.60.20.zip"),
            ]
        }
    }
