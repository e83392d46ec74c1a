"""Export the navigation index as a JSON manifest for the docs renderer.

The renderer (sidebar, breadcrumb bar, and prev/next pager) reads a single
``navigation.json`` rather than importing the index. The manifest lists the
groups in declared order, the canonical page order, and for each slug the
precomputed neighbours and breadcrumb trail, so the frontend never has to
reimplement the lookup rules.

>>> from gorm_studio_docs.declaration import default_navigation
>>> from gorm_studio_docs.manifest import NavigationManifestBuilder
>>> payload = NavigationManifestBuilder(default_navigation()).build_payload()
>>> payload["order"][:2]
['getting-started/introduction', 'getting-started/installation']
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json

from ._constants import MANIFEST_FILENAME

if typ.TYPE_CHECKING:
    from .navigation import NavigationIndex

DEFAULT_MANIFEST_OUTPUT = Path("public/docs") / MANIFEST_FILENAME


class NavigationManifestBuilder:
    """Render a JSON manifest describing the docs navigation."""

    def __init__(self, index: NavigationIndex) -> None:
        self.index = index

    def build_payload(self) -> dict[str, typ.Any]:
        """Return the manifest structure as plain Python objects."""
        index = self.index
        pages: dict[str, dict[str, typ.Any]] = {}
        for item in index.flatten():
            neighbours = index.get_prev_next(item.slug)
            pages[item.slug] = {
                "prev": neighbours.prev,
                "next": neighbours.next,
                "breadcrumbs": list(index.get_breadcrumbs(item.slug)),
            }
        return {
            "root": index.root,
            "groups": [
                {"title": group.title, "items": list(group.items)}
                for group in index.groups
            ],
            "order": [item.slug for item in index.flatten()],
            "pages": pages,
        }

    def render(self) -> bytes:
        """Encode the manifest as indented UTF-8 JSON."""
        encoded = msgspec.json.encode(self.build_payload())
        return msgspec.json.format(encoded, indent=2) + b"\n"

    def run(self, output_path: Path = DEFAULT_MANIFEST_OUTPUT) -> Path:
        """Write the manifest to ``output_path`` and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.render())
        return output_path


__all__ = ["DEFAULT_MANIFEST_OUTPUT", "NavigationManifestBuilder"]
