"""Utility helpers shared by the navigation declaration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..navigation import NavGroup, NavigationError, NavItem, build_href


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return the non-empty string at ``key`` or raise a NavigationError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise NavigationError(msg)
    return value


def _build_item(payload: object, *, group_title: str, position: int) -> NavItem:
    """Build a NavItem from one entry of a group's ``items`` list."""
    where = f"Item {position} of group '{group_title}'"
    if not isinstance(payload, cabc.Mapping):
        msg = f"{where} must be a mapping."
        raise NavigationError(msg)
    title = _require_str(payload, "title", where)
    slug = _require_str(payload, "slug", where)
    href = _optional_str(payload.get("href")) or build_href(slug)
    return NavItem(title=title, slug=slug, href=href)


def _build_group(payload: object, *, position: int) -> NavGroup:
    """Build a NavGroup from one entry of the top-level ``groups`` list."""
    where = f"Group {position}"
    if not isinstance(payload, cabc.Mapping):
        msg = f"{where} must be a mapping."
        raise NavigationError(msg)
    title = _require_str(payload, "title", where)
    match payload.get("items"):
        case list() | tuple() as entries if entries:
            pass
        case _:
            msg = f"Navigation group '{title}' has no items."
            raise NavigationError(msg)
    items = tuple(
        _build_item(entry, group_title=title, position=index)
        for index, entry in enumerate(entries, start=1)
    )
    return NavGroup(title=title, items=items)


__all__ = ["_build_group", "_build_item", "_optional_str", "_require_str"]
