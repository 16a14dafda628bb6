"""
Page-level helpers: titles, footer years, navigation groups and release links.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from django.utils.safestring import mark_safe

from .conf import get_setting


def page_title(title: Optional[str] = None) -> str:
    prefix = get_setting("SASSDOC_TITLE_PREFIX")
    return prefix + (title or get_setting("SASSDOC_DEFAULT_TITLE"))


def copyright_years(start_year: int, today: Optional[datetime.date] = None) -> str:
    """Return ``"2006"`` or ``"2006&ndash;2026"`` for a copyright notice."""
    end_year = (today or datetime.date.today()).year
    if int(start_year) == end_year:
        return str(start_year)
    return mark_safe(f"{start_year}&ndash;{end_year}")


def _field(resource: Any, name: str, default=None):
    if isinstance(resource, Mapping):
        return resource.get(name, default)
    return getattr(resource, name, default)


def pages_for_group(
    group_name: str,
    resources: Iterable[Any] = (),
    nav: Optional[Iterable[Mapping[str, Any]]] = None,
) -> list[dict[str, Any]]:
    """
    Return the ``{"title", "path"}`` entries listed under a navigation group.

    A group may name a ``directory``, in which case every non-hidden resource
    whose path is inside it is listed (sorted by title), and/or an explicit
    list of ``pages``, which follow in the order given.
    """
    if nav is None:
        nav = get_setting("SASSDOC_NAV")

    group = next((g for g in nav if g.get("name") == group_name), None)
    if group is None:
        return []

    pages: list[dict[str, Any]] = []

    directory = group.get("directory")
    if directory:
        listed = [
            {"title": _field(r, "title"), "path": _field(r, "url")}
            for r in resources
            if str(_field(r, "path", "")).startswith(directory)
            and not _field(r, "hidden", False)
        ]
        pages.extend(sorted(listed, key=lambda page: page["title"] or ""))

    for page in group.get("pages") or []:
        pages.append({"title": page.get("title"), "path": page.get("path")})

    return pages


def impl_version(impl: str) -> Optional[str]:
    """
    Return the released version of ``impl`` (``"dart"``, ``"libsass"`` or
    ``"ruby"``), or ``None`` if it hasn't been made available yet.
    """
    versions = get_setting("SASSDOC_VERSIONS") or {}
    return versions.get(impl)


def release_url(impl: str) -> str:
    """Return the URL for the latest release of the given implementation."""
    repos = get_setting("SASSDOC_RELEASE_REPOS")
    try:
        repo = repos[impl]
    except KeyError:
        raise ValueError(f"Unknown implementation {impl!r}") from None

    version = impl_version(impl)
    if version:
        return f"https://github.com/sass/{repo}/releases/tag/{version}"
    return f"https://github.com/sass/{repo}/releases"
