"""Load navigation declarations from YAML or mappings into a NavigationIndex."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from ..navigation import NavigationError, NavigationIndex
from .helpers import _build_group

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_navigation(path: Path) -> NavigationIndex:
    """Load the YAML declaration describing documentation groups and pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML declaration (for example,
        ``config/navigation.yaml``).

    Returns
    -------
    NavigationIndex
        Validated index built from the declared groups, in file order.

    Raises
    ------
    FileNotFoundError
        If the declaration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    NavigationError
        If groups are missing, a group or item is malformed, or a slug is
        declared twice.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from gorm_studio_docs.config import load_navigation
    >>> index = load_navigation(Path("config/navigation.yaml"))  # doctest: +SKIP
    >>> index.flatten()[0].slug  # doctest: +SKIP
    'getting-started/introduction'
    """
    if not path.exists():
        msg = f"Navigation file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_index(loaded)


def build_index(payload: typ.Mapping[str, typ.Any]) -> NavigationIndex:
    """Build a NavigationIndex from a ``{"groups": [...]}`` mapping."""
    match payload.get("groups"):
        case list() | tuple() as groups_raw if groups_raw:
            pass
        case _:
            msg = "No groups defined in navigation declaration."
            raise NavigationError(msg)
    groups = [
        _build_group(entry, position=index)
        for index, entry in enumerate(groups_raw, start=1)
    ]
    return NavigationIndex(groups)


__all__ = ["build_index", "load_navigation"]
