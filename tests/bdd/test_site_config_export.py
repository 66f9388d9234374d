"""Behaviour tests for exporting the blog site configuration.

These pytest-bdd scenarios export the built-in configuration in each
document format the generator may read and check that nothing is lost on the
way back: the record is equal and the header menu and static pages keep their
declaration order.

Usage
-----
Run ``pytest tests/bdd/test_site_config_export.py -v``. The scenarios live in
``features/site_config_export.feature`` and only write into ``tmp_path``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from wagjo_blog.config import (
    SiteConfig,
    dump_site_config,
    get_site_config,
    load_site_config,
)

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "site_config_export.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


def _split_names(text: str) -> list[str]:
    return [name.strip() for name in text.split(",") if name.strip()]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("the built-in blog site configuration")
def given_built_in_config(scenario_state: ScenarioState) -> None:
    """Store the built-in configuration for later steps."""
    scenario_state["config"] = get_site_config()


@when(parsers.parse('I export it as "{fmt}"'))
def when_export(fmt: str, tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write the configuration to a document in ``fmt`` and reload it."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    path = dump_site_config(config, tmp_path / f"site.{fmt}")
    scenario_state["loaded"] = load_site_config(path)


@then("the exported document loads back into an equal configuration")
def then_equal(scenario_state: ScenarioState) -> None:
    """Verify the reloaded configuration equals the original."""
    assert scenario_state["loaded"] == scenario_state["config"], (
        "expected the exported document to load back into an equal configuration"
    )


@then(parsers.parse('the header menu lists "{names}"'))
def then_menu_order(names: str, scenario_state: ScenarioState) -> None:
    """Verify header menu names appear in the declared order."""
    loaded = typ.cast("SiteConfig", scenario_state["loaded"])
    actual = [link.name for link in loaded.header_menu]
    assert actual == _split_names(names), f"unexpected menu order {actual!r}"


@then(parsers.parse('the static pages list "{filenames}"'))
def then_page_order(filenames: str, scenario_state: ScenarioState) -> None:
    """Verify static page filenames appear in the declared order."""
    loaded = typ.cast("SiteConfig", scenario_state["loaded"])
    actual = [page.filename for page in loaded.static_pages]
    assert actual == _split_names(filenames), f"unexpected page order {actual!r}"
