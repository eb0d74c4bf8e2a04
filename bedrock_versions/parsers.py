"""Version extraction and ranking logic.

Pure functions for turning the download links payload into version
records, classifying them as stable or preview, and picking the latest.
No I/O or network calls. All inputs are in-memory data structures.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass
from typing import Any

_PREVIEW_RE = re.compile(r"preview", re.IGNORECASE)

SERVER_MARKER = "server-"
SERVER_ARCHIVE_MARKER = "server-1"
ARCHIVE_SUFFIX = ".zip"


@dataclass(frozen=True)
class VersionRecord:
    """A single server release parsed from a download link.

    Attributes:
        version: Dotted identifier exactly as found in the URL.
        major: First component.
        minor: Second component.
        patch: Third component.
        build: Fourth component, 0 when the URL has only three.
        preview: Whether the link was labeled as a preview build.
    """

    version: str
    major: int
    minor: int
    patch: int
    build: int = 0
    preview: bool = False

    @property
    def sort_key(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.build)

    @property
    def short_version(self) -> str:
        """The ``major.minor.patch`` form, without the build number."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        return {"preview": data.pop("preview"), **data}


def iter_links(payload: Any) -> Iterator[dict[str, Any]]:
    """Yield the link entries of a ``{"result": {"links": [...]}}`` payload.

    Anything that does not have that shape yields nothing.
    """
    result = payload.get("result") if isinstance(payload, dict) else None
    links = result.get("links") if isinstance(result, dict) else None
    if not isinstance(links, list):
        return
    for item in links:
        if isinstance(item, dict):
            yield item


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def is_server_archive(url: str) -> bool:
    """Check whether a URL points at a 1.x server distribution archive."""
    return url.endswith(ARCHIVE_SUFFIX) and SERVER_ARCHIVE_MARKER in url


def is_preview_label(label: str) -> bool:
    return bool(_PREVIEW_RE.search(label))


def version_from_url(url: str) -> str:
    """Return the text after the last ``server-``, minus a trailing ``.zip``.

    Args:
        url: A download URL such as ``.../bedrock-server-1.20.81.1.zip``.

    Returns:
        The candidate version string, e.g. ``1.20.81.1``.
    """
    tail = url.rsplit(SERVER_MARKER, 1)[-1]
    if tail.endswith(ARCHIVE_SUFFIX):
        tail = tail[: -len(ARCHIVE_SUFFIX)]
    return tail


def parse_version_string(candidate: str, preview: bool = False) -> VersionRecord | None:
    """Parse a dotted version string into a ``VersionRecord``.

    Requires at least three components made only of ASCII digits. Any
    components past the fourth are kept in ``version`` but otherwise ignored.

    Args:
        candidate: String like ``1.20.81.1`` or ``1.21.0``.
        preview: Classification to attach to the record.

    Returns:
        The record, or None if the string is malformed.
    """
    parts = candidate.split(".")
    if len(parts) < 3:
        return None
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None
    numbers = [int(p) for p in parts]
    major, minor, patch = numbers[:3]
    build = numbers[3] if len(numbers) > 3 else 0
    return VersionRecord(
        version=candidate,
        major=major,
        minor=minor,
        patch=patch,
        build=build,
        preview=preview,
    )


def parse_links_to_versions(payload: Any) -> list[VersionRecord]:
    """Extract unique server versions from the download links payload.

    Both stable and preview builds are returned, in payload order, each
    tagged with its classification. When the same version string appears
    more than once, the first occurrence wins regardless of its label.

    Args:
        payload: Parsed JSON from the links endpoint.

    Returns:
        List of ``VersionRecord`` in first-seen order.
    """
    seen: set[str] = set()
    out: list[VersionRecord] = []

    for item in iter_links(payload):
        label = _text(item.get("downloadType"))
        url = _text(item.get("downloadUrl"))
        if not is_server_archive(url):
            continue

        candidate = version_from_url(url)
        record = parse_version_string(candidate, preview=is_preview_label(label))
        if record is None or candidate in seen:
            continue
        seen.add(candidate)
        out.append(record)
    return out


def filter_versions(records: Iterable[VersionRecord], preview: bool) -> list[VersionRecord]:
    """Select the stable or preview subset, sorted ascending.

    Ordering compares major, minor, patch, then build, numerically.
    """
    subset = [r for r in records if r.preview == preview]
    subset.sort(key=lambda r: r.sort_key)
    return subset


def latest_version(records: Iterable[VersionRecord]) -> VersionRecord | None:
    """Return the highest record by ``sort_key``, or None if empty."""
    return max(records, key=lambda r: r.sort_key, default=None)
