"""
Fetch the titools repository and release metadata from GitHub.

One attempt per call, no retries: any network, HTTP or archive problem is
raised as DownloadError for the command to report.
"""

import io
import json
import tarfile
from pathlib import Path, PurePosixPath
from urllib.error import URLError
from urllib.request import Request, urlopen

from titools.config import DEFAULT_BRANCH, DEFAULT_REPO, DEFAULT_TIMEOUT
from titools.errors import DownloadError
from titools.versions import compare_versions

_ARCHIVE_URL = "https://codeload.github.com/{repo}/tar.gz/refs/heads/{branch}"
_LATEST_RELEASE_URL = "https://api.github.com/repos/{repo}/releases/latest"
_USER_AGENT = "titools"


def _fetch(url: str, timeout: int, accept: str = "*/*") -> bytes:
    req = Request(url, headers={"Accept": accept, "User-Agent": _USER_AGENT})
    try:
        with urlopen(req, timeout=timeout) as resp:
            return resp.read()
    except (URLError, OSError) as e:
        raise DownloadError(f"Failed to fetch {url}: {e}") from e


def _safe_members(tar: tarfile.TarFile) -> list:
    """Reject members that would land outside the extraction directory."""
    members = tar.getmembers()
    for member in members:
        path = PurePosixPath(member.name)
        if path.is_absolute() or ".." in path.parts:
            raise DownloadError(f"Unsafe path in archive: {member.name}")
        if member.issym() or member.islnk():
            link = PurePosixPath(member.linkname)
            if link.is_absolute() or ".." in link.parts:
                raise DownloadError(f"Unsafe link in archive: {member.name}")
    return members


def extract_archive(data: bytes, dest_dir: Path) -> Path:
    """Unpack a .tar.gz into dest_dir and return its single top-level directory."""
    try:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as tar:
            members = _safe_members(tar)
            if not members:
                raise DownloadError("Downloaded archive is empty")
            if hasattr(tarfile, "data_filter"):
                tar.extractall(dest_dir, members=members, filter="data")
            else:
                tar.extractall(dest_dir, members=members)
    except (tarfile.TarError, OSError) as e:
        raise DownloadError(f"Failed to unpack archive: {e}") from e

    top = PurePosixPath(members[0].name).parts[0]
    return dest_dir / top


def download_repo_archive(
    dest_dir: Path,
    repo: str = DEFAULT_REPO,
    branch: str = DEFAULT_BRANCH,
    timeout: int = DEFAULT_TIMEOUT,
) -> Path:
    """Download the repository tarball into dest_dir; return the repo root."""
    url = _ARCHIVE_URL.format(repo=repo, branch=branch)
    return extract_archive(_fetch(url, timeout), dest_dir)


def get_latest_version(repo: str = DEFAULT_REPO, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Return the latest release tag without its leading 'v'."""
    url = _LATEST_RELEASE_URL.format(repo=repo)
    body = _fetch(url, timeout, accept="application/vnd.github+json")
    try:
        tag = json.loads(body)["tag_name"]
    except (ValueError, KeyError, TypeError) as e:
        raise DownloadError(f"Unexpected release metadata from {url}") from e
    return tag[1:] if tag.startswith("v") else tag


def check_for_update(
    current_version: str, repo: str = DEFAULT_REPO, timeout: int = DEFAULT_TIMEOUT
):
    """Return the newer release version, or None when current is up to date."""
    latest = get_latest_version(repo, timeout)
    return latest if compare_versions(latest, current_version) > 0 else None
