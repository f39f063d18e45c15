"""Record shapes for the site's content tables, plus the checks run at build time.

The tables themselves live in ``header_nav_links.py`` and ``projects_data.py``.
Both call the validators below on import, so a malformed entry stops the site
from building instead of reaching a template.
"""

from __future__ import annotations

import dataclasses as dc
import re
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

ABSOLUTE_URL_PREFIX = "https://"
SITE_RELATIVE_PREFIX = "/"

_WHITESPACE_RUN = re.compile(r"\s+")


class ContentValidationError(ValueError):
    """One or more content records do not match their schema.

    ``errors`` holds one ``"<table>[<index>].<field>: <message>"`` line per problem.
    """

    def __init__(self, errors: Sequence[str]):
        self.errors = list(errors)
        super().__init__("Invalid content:\n  " + "\n  ".join(self.errors))

    def __reduce__(self):
        return (self.__class__, (self.errors,))


@dc.dataclass(frozen=True)
class NavigationLink:
    """A header menu entry: where it goes and what it says."""

    href: str
    title: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> NavigationLink:
        return cls(href=data.get("href", ""), title=data.get("title", ""))


@dc.dataclass(frozen=True)
class Project:
    """A portfolio entry.

    Attributes
    ----------
    title : str
        Card heading.
    description : str
        Free prose. May carry hard line breaks from the source; renderers
        collapse them with :func:`normalize_description`.
    href : str or None
        Where the card links to. ``None`` makes the card informational only.
    img_src : str or None
        Site-relative path of the cover image. ``None`` means the renderer
        shows the placeholder.
    """

    title: str
    description: str
    href: str | None = None
    img_src: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Project:
        # Content exported from the old site uses imgSrc
        img_src = data.get("img_src") or data.get("imgSrc")
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            href=data.get("href"),
            img_src=img_src,
        )


# -----------------------------
# Helpers
# -----------------------------
def _is_filled(value) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_site_relative(value) -> bool:
    """True for ``/path`` but not ``//host/path`` or ``/\\host``, which browsers send off-site."""
    if not _is_filled(value) or not value.startswith(SITE_RELATIVE_PREFIX):
        return False
    return value[1:2] not in ("/", "\\")


def is_link_target(value) -> bool:
    """True for an absolute https URL or a site-relative path."""
    if not _is_filled(value):
        return False
    return is_site_relative(value) or value.startswith(ABSOLUTE_URL_PREFIX)


def is_internal_href(href: str) -> bool:
    return is_site_relative(href)


def normalize_description(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text).strip()


def asset_path(img_src: str, static_root) -> Path:
    """Map ``/static/images/x.png`` onto the file under ``static_root``."""
    rel = img_src.lstrip("/")
    if rel.startswith("static/"):
        rel = rel[len("static/"):]
    return Path(static_root) / rel


# -----------------------------
# Validation
# -----------------------------
def validate_nav_links(links: Iterable[NavigationLink], table: str = "HEADER_NAV_LINKS") -> None:
    errors = []
    for i, link in enumerate(links):
        where = f"{table}[{i}]"
        if not isinstance(link, NavigationLink):
            errors.append(f"{where}: expected NavigationLink, got {type(link).__name__}")
            continue
        if not _is_filled(link.title):
            errors.append(f"{where}.title: must be a non-empty string")
        if not _is_filled(link.href):
            errors.append(f"{where}.href: must be a non-empty string")
        elif not is_link_target(link.href):
            errors.append(f"{where}.href: {link.href!r} must be a site-relative path or an https:// URL")

    if errors:
        raise ContentValidationError(errors)


def validate_projects(projects: Iterable[Project], table: str = "PROJECTS") -> None:
    errors = []
    for i, project in enumerate(projects):
        where = f"{table}[{i}]"
        if not isinstance(project, Project):
            errors.append(f"{where}: expected Project, got {type(project).__name__}")
            continue
        if not _is_filled(project.title):
            errors.append(f"{where}.title: must be a non-empty string")
        if not _is_filled(project.description):
            errors.append(f"{where}.description: must be a non-empty string")

        if project.href is not None and not is_link_target(project.href):
            errors.append(f"{where}.href: {project.href!r} must be a site-relative path or an https:// URL")

        if project.img_src is not None:
            if not is_site_relative(project.img_src):
                errors.append(f"{where}.img_src: {project.img_src!r} must be a site-relative path")

    if errors:
        raise ContentValidationError(errors)


def find_duplicates(records: Iterable[Any], field: str) -> list[tuple[int, str]]:
    """Return ``(index, value)`` for each record repeating an earlier record's ``field``."""
    seen = set()
    dupes = []
    for i, record in enumerate(records):
        value = getattr(record, field)
        if value is None:
            continue
        if value in seen:
            dupes.append((i, value))
        seen.add(value)
    return dupes


def missing_assets(projects: Iterable[Project], static_root) -> list[tuple[int, str]]:
    return [
        (i, p.img_src)
        for i, p in enumerate(projects)
        if p.img_src and not asset_path(p.img_src, static_root).is_file()
    ]
