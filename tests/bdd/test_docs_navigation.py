"""Behaviour tests for docs prev/next links and breadcrumbs.

These pytest-bdd scenarios walk the built-in GORM Studio navigation the way a
reader would: open a page, then check which pages the pager offers and what
the breadcrumb bar shows. They are backed by
``features/docs_navigation.feature``.

Usage:
    pytest tests/bdd/test_docs_navigation.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from gorm_studio_docs.declaration import default_navigation

if typ.TYPE_CHECKING:
    from gorm_studio_docs.navigation import NavigationIndex

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "docs_navigation.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("the built-in docs navigation")
def given_builtin_navigation(scenario_state: ScenarioState) -> None:
    """Build the index from the declaration shipped with the site."""
    scenario_state["index"] = default_navigation()


@when(parsers.parse('I look up "{slug}"'))
def when_look_up(scenario_state: ScenarioState, slug: str) -> None:
    """Resolve neighbours and breadcrumbs for ``slug``."""
    index: NavigationIndex = scenario_state["index"]
    scenario_state["neighbours"] = index.get_prev_next(slug)
    scenario_state["breadcrumbs"] = index.get_breadcrumbs(slug)


@then(parsers.parse('the previous page is "{title}"'))
def then_previous_is(scenario_state: ScenarioState, title: str) -> None:
    """Verify the pager's previous link."""
    prev = scenario_state["neighbours"].prev
    assert prev is not None, "expected a previous page"
    assert prev.title == title, f"expected previous {title!r}, got {prev.title!r}"


@then(parsers.parse('the next page is "{title}"'))
def then_next_is(scenario_state: ScenarioState, title: str) -> None:
    """Verify the pager's next link."""
    following = scenario_state["neighbours"].next
    assert following is not None, "expected a next page"
    assert following.title == title, (
        f"expected next {title!r}, got {following.title!r}"
    )


@then("there is no previous page")
def then_no_previous(scenario_state: ScenarioState) -> None:
    """Verify the pager offers no previous link."""
    assert scenario_state["neighbours"].prev is None, "expected no previous page"


@then("there is no next page")
def then_no_next(scenario_state: ScenarioState) -> None:
    """Verify the pager offers no next link."""
    assert scenario_state["neighbours"].next is None, "expected no next page"


@then(parsers.parse('the breadcrumbs read "{trail}"'))
def then_breadcrumbs_read(scenario_state: ScenarioState, trail: str) -> None:
    """Verify the breadcrumb titles, joined with ``>``."""
    actual = " > ".join(crumb.title for crumb in scenario_state["breadcrumbs"])
    assert actual == trail, f"expected breadcrumbs {trail!r}, got {actual!r}"


@then(parsers.parse('the "{title}" crumb links to "{href}"'))
def then_crumb_links_to(scenario_state: ScenarioState, title: str, href: str) -> None:
    """Verify the href of the crumb labelled ``title``."""
    crumb = next(
        (c for c in scenario_state["breadcrumbs"] if c.title == title), None
    )
    assert crumb is not None, f"expected a crumb titled {title!r}"
    assert crumb.href == href, f"expected {href!r}, got {crumb.href!r}"
