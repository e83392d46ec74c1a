"""Cyclopts CLI entrypoint for inspecting and exporting the docs navigation.

The ``docs-nav`` console script validates the navigation declaration, prints
the canonical page order, resolves the neighbours and breadcrumbs of a single
page, and writes the ``navigation.json`` manifest consumed by the site
renderer. Every command uses the built-in GORM Studio declaration unless a
YAML file is passed with ``--config`` (or ``INPUT_CONFIG``).

Examples
--------
Validate the built-in declaration:

>>> from gorm_studio_docs.cli import main
>>> main()  # doctest: +SKIP

Look up a page against a YAML declaration:

>>> from gorm_studio_docs.cli import app
>>> app.run(
...     ["lookup", "configuration/basic", "--config", "config/navigation.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter

from .config import load_navigation
from .declaration import default_navigation
from .manifest import DEFAULT_MANIFEST_OUTPUT, NavigationManifestBuilder

if typ.TYPE_CHECKING:
    from .navigation import NavigationIndex

app = App(name="docs-nav", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(
        help="YAML navigation declaration (defaults to the built-in one)",
        env_var="INPUT_CONFIG",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_index(config: Path | None) -> NavigationIndex:
    if config is None:
        return default_navigation()
    return load_navigation(config)


@app.command(help="Validate the navigation declaration.")
def check(*, config: ConfigOption = None) -> None:
    """Build the index and report its size.

    Raises
    ------
    NavigationError
        If the declaration is malformed (empty group, duplicate slug, ...).
    """
    index = _load_index(config)
    print(f"ok: {len(index.groups)} groups, {len(index)} pages")


@app.command(help="Print every page in canonical order.")
def order(*, config: ConfigOption = None) -> None:
    """Print one ``slug<TAB>title`` line per page, in browsing order."""
    for item in _load_index(config).flatten():
        print(f"{item.slug}\t{item.title}")


@app.command(help="Show the neighbours and breadcrumbs of a page as JSON.")
def lookup(slug: str, *, config: ConfigOption = None) -> None:
    """Resolve ``slug`` against the index and print the result.

    Parameters
    ----------
    slug : str
        Page identifier such as ``configuration/basic``. Unknown slugs are
        reported with ``"found": false``, no neighbours, and the root-only
        breadcrumb trail.
    config : Path or None, optional
        YAML declaration to load instead of the built-in one.
    """
    index = _load_index(config)
    neighbours = index.get_prev_next(slug)
    payload = {
        "slug": slug,
        "found": slug in index,
        "prev": neighbours.prev,
        "next": neighbours.next,
        "breadcrumbs": list(index.get_breadcrumbs(slug)),
    }
    print(msgspec.json.format(msgspec.json.encode(payload), indent=2).decode("utf-8"))


@app.command(help="Write the navigation manifest consumed by the site renderer.")
def export(
    *,
    config: ConfigOption = None,
    output: typ.Annotated[
        Path, Parameter(help="Manifest output path", env_var="INPUT_OUTPUT")
    ] = DEFAULT_MANIFEST_OUTPUT,
) -> None:
    """Write ``navigation.json`` and print the written path."""
    written = NavigationManifestBuilder(_load_index(config)).run(output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs-nav`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
