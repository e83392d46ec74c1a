"""Load and validate documentation navigation declarations.

This subpackage parses a ``navigation.yaml`` file (or an equivalent in-memory
mapping) into the groups and pages of a
:class:`~gorm_studio_docs.navigation.NavigationIndex`. Every declaration goes
through the same validation: groups need a title and at least one item, items
need a title and a slug, and slugs must be unique across the index.

Examples
--------
>>> from gorm_studio_docs.config import build_index
>>> index = build_index(
...     {"groups": [{"title": "Export", "items": [
...         {"title": "Schema Export", "slug": "export/schema"}]}]}
... )
>>> index.flatten()[0].href
'/docs/export/schema'
"""

from .loader import build_index, load_navigation

__all__ = ["build_index", "load_navigation"]
