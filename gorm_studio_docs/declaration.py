"""Built-in navigation declaration for the GORM Studio documentation.

The site ships with this declaration; the docs server builds a single
:class:`~gorm_studio_docs.navigation.NavigationIndex` from it at startup and
hands that instance to whatever renders pages. Hrefs are not listed because
they are derived from slugs (``/docs/<slug>``).

Examples
--------
>>> from gorm_studio_docs.declaration import default_navigation
>>> index = default_navigation()
>>> index.get_prev_next("getting-started/installation").next.title
'Quick Start'
"""

from __future__ import annotations

import typing as typ

from .config import build_index

if typ.TYPE_CHECKING:
    from .navigation import NavigationIndex


def _group(title: str, *items: tuple[str, str]) -> dict[str, typ.Any]:
    return {
        "title": title,
        "items": [{"title": label, "slug": slug} for label, slug in items],
    }


NAVIGATION_DECLARATION: dict[str, typ.Any] = {
    "groups": [
        _group(
            "Getting Started",
            ("Introduction", "getting-started/introduction"),
            ("Installation", "getting-started/installation"),
            ("Quick Start", "getting-started/quick-start"),
        ),
        _group(
            "Configuration",
            ("Basic Config", "configuration/basic"),
            ("Authentication", "configuration/authentication"),
            ("CORS", "configuration/cors"),
            ("Security", "configuration/security"),
        ),
        _group(
            "Database Support",
            ("SQLite", "databases/sqlite"),
            ("PostgreSQL", "databases/postgresql"),
            ("MySQL", "databases/mysql"),
        ),
        _group(
            "Features",
            ("Schema Browser", "features/schema-browser"),
            ("Data Management", "features/data-management"),
            ("SQL Editor", "features/sql-editor"),
            ("Relationships", "features/relationships"),
            ("Soft Deletes", "features/soft-deletes"),
        ),
        _group(
            "Export",
            ("Schema Export", "export/schema"),
            ("Data Export", "export/data"),
            ("Go Models", "export/models"),
        ),
        _group(
            "Import",
            ("Schema Import", "import/schema"),
            ("Data Import", "import/data"),
            ("Go Models", "import/models"),
        ),
        _group(
            "API Reference",
            ("Schema API", "api/schema"),
            ("Rows API", "api/rows"),
            ("Export API", "api/export"),
            ("Import API", "api/import"),
            ("SQL API", "api/sql"),
            ("Stats API", "api/stats"),
        ),
    ]
}


def default_navigation() -> NavigationIndex:
    """Build the index for the built-in GORM Studio declaration."""
    return build_index(NAVIGATION_DECLARATION)


__all__ = ["NAVIGATION_DECLARATION", "default_navigation"]
