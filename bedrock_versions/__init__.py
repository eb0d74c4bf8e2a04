"""bedrock_versions — latest Minecraft Bedrock Dedicated Server versions.

This package fetches the public download links listing, extracts the
server archive versions from it, and reports the latest stable and
preview releases.
"""

import logging

from .config import FetchConfig, load_config
from .errors import BedrockVersionsError, NetworkError, NotFoundError
from .parsers import VersionRecord, parse_links_to_versions
from .versions import (
    get_all_preview_versions,
    get_all_stable_versions,
    get_latest_preview_version,
    get_latest_stable_version,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BedrockVersionsError",
    "FetchConfig",
    "NetworkError",
    "NotFoundError",
    "VersionRecord",
    "get_all_preview_versions",
    "get_all_stable_versions",
    "get_latest_preview_version",
    "get_latest_stable_version",
    "load_config",
    "parse_links_to_versions",
]
