"""Navigation index and tooling for the GORM Studio documentation site.

The package builds the ordered docs navigation (groups of pages, prev/next
links, breadcrumb trails) from a static declaration and exposes the
``docs-nav`` CLI used to validate it and export it for the site renderer.

Exports
-------
- ``NavigationIndex``: immutable index answering prev/next and breadcrumbs.
- ``default_navigation``: build the index for the built-in declaration.
- ``app`` / ``main``: Cyclopts application and its console entry point.

Examples
--------
>>> from gorm_studio_docs import default_navigation
>>> [crumb.title for crumb in default_navigation().get_breadcrumbs("databases/mysql")]
['Docs', 'Database Support', 'MySQL']
"""

from __future__ import annotations

from .cli import app, main
from .declaration import default_navigation
from .navigation import NavigationError, NavigationIndex

__all__ = [
    "NavigationError",
    "NavigationIndex",
    "app",
    "default_navigation",
    "main",
]
