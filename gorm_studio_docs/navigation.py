"""Ordered navigation index for the GORM Studio documentation pages.

The index groups documentation entries into sections, linearizes them into a
canonical browsing order (groups in declared order, entries in declared order
within each group), and answers prev/next and breadcrumb queries for a page
slug. It is built once from a static declaration and never mutated, so a
single instance can be shared freely by every request that renders docs.

Unknown slugs are not errors: :meth:`NavigationIndex.get_prev_next` reports
no neighbours and :meth:`NavigationIndex.get_breadcrumbs` degrades to the docs
root. A malformed declaration (empty group, duplicate slug, blank title)
raises :class:`NavigationError` at construction time.

Examples
--------
>>> from gorm_studio_docs.navigation import NavGroup, NavItem, NavigationIndex
>>> index = NavigationIndex(
...     [
...         NavGroup(
...             "Getting Started",
...             (
...                 NavItem.from_slug("Introduction", "getting-started/introduction"),
...                 NavItem.from_slug("Installation", "getting-started/installation"),
...             ),
...         )
...     ]
... )
>>> index.get_prev_next("getting-started/installation").prev.title
'Introduction'
>>> [crumb.title for crumb in index.get_breadcrumbs("nonexistent/page")]
['Docs']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import DOCS_HREF_PREFIX, ROOT_BREADCRUMB_TITLE

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class NavigationError(ValueError):
    """Raised when a navigation declaration is invalid."""


def build_href(slug: str) -> str:
    """Return the site link for ``slug`` (``/docs/`` followed by the slug)."""
    return f"{DOCS_HREF_PREFIX}{slug}"


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """A single documentation page."""

    title: str
    slug: str
    href: str

    @classmethod
    def from_slug(cls, title: str, slug: str) -> NavItem:
        """Build an entry whose href is derived from its slug."""
        return cls(title=title, slug=slug, href=build_href(slug))


@dc.dataclass(frozen=True, slots=True)
class NavGroup:
    """A titled, ordered section of documentation pages."""

    title: str
    items: tuple[NavItem, ...]

    def __post_init__(self) -> None:
        # Callers may pass a list; keep a private, immutable copy.
        object.__setattr__(self, "items", tuple(self.items))


@dc.dataclass(frozen=True, slots=True)
class Breadcrumb:
    """A labelled link in a breadcrumb trail."""

    title: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class PrevNext:
    """Neighbours of a page in canonical order; ``None`` marks no neighbour."""

    prev: NavItem | None = None
    next: NavItem | None = None


class NavigationIndex:
    """Immutable, validated view over an ordered declaration of groups."""

    __slots__ = ("_groups", "_items", "_positions", "_owners")

    def __init__(self, groups: cabc.Iterable[NavGroup]) -> None:
        """Validate ``groups`` and precompute the canonical order.

        Parameters
        ----------
        groups : Iterable[NavGroup]
            Groups in declared order. Each group must hold at least one
            entry and every slug must be unique across the whole index.

        Raises
        ------
        NavigationError
            If no groups are declared, a group is empty or untitled, an entry
            lacks a title or slug, an href does not match its slug, or a slug
            is declared twice.
        """
        frozen = tuple(groups)
        if not frozen:
            msg = "Navigation declaration defines no groups."
            raise NavigationError(msg)

        items: list[NavItem] = []
        positions: dict[str, int] = {}
        owners: dict[str, NavGroup] = {}
        for group in frozen:
            _validate_group(group)
            for item in group.items:
                _validate_item(item, group)
                if item.slug in positions:
                    first_owner = owners[item.slug].title
                    msg = (
                        f"Duplicate slug '{item.slug}' in group '{group.title}' "
                        f"(first declared in '{first_owner}')."
                    )
                    raise NavigationError(msg)
                positions[item.slug] = len(items)
                owners[item.slug] = group
                items.append(item)

        self._groups = frozen
        self._items = tuple(items)
        self._positions = positions
        self._owners = owners

    @property
    def groups(self) -> tuple[NavGroup, ...]:
        """Return the groups in declared order."""
        return self._groups

    @property
    def root(self) -> Breadcrumb:
        """Return the docs-root breadcrumb, linked to the first entry."""
        return Breadcrumb(title=ROOT_BREADCRUMB_TITLE, href=self._items[0].href)

    def flatten(self) -> tuple[NavItem, ...]:
        """Return every entry in canonical order."""
        return self._items

    def get(self, slug: str) -> NavItem | None:
        """Return the entry for ``slug`` or ``None`` when it is not indexed."""
        position = self._positions.get(slug)
        if position is None:
            return None
        return self._items[position]

    def group_for(self, slug: str) -> NavGroup | None:
        """Return the group that holds ``slug``, or ``None``."""
        return self._owners.get(slug)

    def get_prev_next(self, slug: str) -> PrevNext:
        """Return the entries before and after ``slug`` in canonical order.

        Both neighbours are ``None`` when ``slug`` is not indexed; the first
        entry has no ``prev`` and the last has no ``next``.
        """
        position = self._positions.get(slug)
        if position is None:
            return PrevNext()
        prev = self._items[position - 1] if position > 0 else None
        following = (
            self._items[position + 1] if position < len(self._items) - 1 else None
        )
        return PrevNext(prev=prev, next=following)

    def get_breadcrumbs(self, slug: str) -> tuple[Breadcrumb, ...]:
        """Return the trail from the docs root down to ``slug``.

        Parameters
        ----------
        slug : str
            Page identifier, matched exactly.

        Returns
        -------
        tuple[Breadcrumb, ...]
            ``(root, group, page)`` for an indexed slug, where the group crumb
            links to the group's first page. Unknown slugs yield ``(root,)``.
        """
        root = self.root
        group = self._owners.get(slug)
        if group is None:
            return (root,)
        item = self._items[self._positions[slug]]
        return (
            root,
            Breadcrumb(title=group.title, href=group.items[0].href),
            Breadcrumb(title=item.title, href=item.href),
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> cabc.Iterator[NavItem]:
        return iter(self._items)

    def __contains__(self, slug: object) -> bool:
        return slug in self._positions

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(groups={len(self._groups)}, "
            f"pages={len(self._items)})"
        )


def _validate_group(group: NavGroup) -> None:
    """Ensure a group has a title and at least one entry."""
    if not group.title.strip():
        msg = "Navigation group is missing a 'title'."
        raise NavigationError(msg)
    if not group.items:
        msg = f"Navigation group '{group.title}' has no items."
        raise NavigationError(msg)


def _validate_item(item: NavItem, group: NavGroup) -> None:
    """Ensure an entry is complete and its href follows from its slug."""
    if not item.slug.strip():
        msg = f"Entry '{item.title}' in group '{group.title}' is missing a 'slug'."
        raise NavigationError(msg)
    if item.slug != item.slug.strip():
        msg = (
            f"Entry slug '{item.slug}' in group '{group.title}' has surrounding "
            "whitespace."
        )
        raise NavigationError(msg)
    if not item.title.strip():
        msg = f"Entry '{item.slug}' in group '{group.title}' is missing a 'title'."
        raise NavigationError(msg)
    expected = build_href(item.slug)
    if item.href != expected:
        msg = (
            f"Entry '{item.slug}' has href '{item.href}'; expected '{expected}'."
        )
        raise NavigationError(msg)


__all__ = [
    "Breadcrumb",
    "NavGroup",
    "NavItem",
    "NavigationError",
    "NavigationIndex",
    "PrevNext",
    "build_href",
]
