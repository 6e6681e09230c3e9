from dataclasses import dataclass
import re

from packaging.version import InvalidVersion, Version

from luarocks_setup import config
from luarocks_setup.utility import render

_LEGACY = re.compile(r"^2\.")
_TAG = re.compile(r"^v(?=\d)")


class VersionError(ValueError):
    pass


@dataclass(frozen=True)
class Source:
    version: str
    url: str
    archive: str
    directory: str
    is_ref: bool = False


def resolve_windows(spec: str) -> Source:
    # refs are not supported here, an "@..." spec is used as a literal version
    archive = render(config.release_archive, version=spec, suffix="-windows-64.zip")
    return Source(
        version=spec,
        url=render(config.release_url, releases_url=config.releases_url, archive=archive),
        archive=archive,
        directory=archive.removesuffix(".zip"),
    )


def resolve_unix(spec: str) -> Source:
    if spec.startswith(config.REF_SIGIL):
        ref = spec[len(config.REF_SIGIL) :] or config.DEFAULT_BRANCH
        # github names the archive root after the ref, minus the "v" of version tags
        name = _TAG.sub("", ref.replace("/", "-"))
        return Source(
            version=ref,
            url=render(config.ref_url, repo_url=config.repo_url, ref=ref),
            archive=f"{name}.tar.gz",
            directory=f"luarocks-{name}",
            is_ref=True,
        )
    archive = render(config.release_archive, version=spec, suffix=".tar.gz")
    return Source(
        version=spec,
        url=render(config.release_url, releases_url=config.releases_url, archive=archive),
        archive=archive,
        directory=archive.removesuffix(".tar.gz"),
    )


def is_legacy(version: str) -> bool:
    return bool(_LEGACY.match(_TAG.sub("", version)))


def older_than(version: str, threshold: str) -> bool:
    try:
        return Version(version) < Version(threshold)
    except InvalidVersion as e:
        raise VersionError(f"Cannot compare LuaRocks version '{version}' with '{threshold}'") from e
