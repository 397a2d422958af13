"""
Tests for terminal rendering of command results.
"""

import io

import allure
import pytest
from rich.console import Console

from ide_jump.command_system import CommandResult, get_command_registry
from ide_jump.config import ConfigManager
from ide_jump.constants import DEFAULT_IDE_ENV_VAR
from ide_jump.rich_ui.renderer import RichRenderer


@pytest.fixture
def output():
    buffer = io.StringIO()
    renderer = RichRenderer(Console(file=buffer, width=200, color_system=None))
    return renderer, buffer


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.delenv(DEFAULT_IDE_ENV_VAR, raising=False)
    return ConfigManager(tmp_path / "config.json")


def _lines_mentioning(text, needles):
    return [line for line in text.splitlines() if any(n in line for n in needles)]


@allure.feature("Rendering")
@allure.story("Listings")
@allure.severity(allure.severity_level.NORMAL)
def test_help_listing_has_one_command_per_line(output):
    renderer, buffer = output
    registry = get_command_registry()
    names = [f"/{command.name} " for command in registry.visible_commands()]

    renderer.render_result(registry.execute("help"))

    lines = _lines_mentioning(buffer.getvalue(), names)
    assert len(lines) == len(names)
    for line in lines:
        assert sum(name in line for name in names) == 1


@allure.feature("Rendering")
@allure.story("Listings")
@allure.severity(allure.severity_level.NORMAL)
def test_override_listing_has_one_entry_per_line(output, config):
    renderer, buffer = output
    config.set_override("idea", "/opt/idea/bin/idea")
    config.set_override("goland", "/opt/goland/bin/goland")

    renderer.render_result(get_command_registry().execute("override", "list", config=config))

    lines = _lines_mentioning(buffer.getvalue(), ["/opt/idea/", "/opt/goland/"])
    assert len(lines) == 2


@allure.feature("Rendering")
@allure.story("Listings")
@allure.severity(allure.severity_level.MINOR)
def test_help_examples_on_separate_lines(output):
    renderer, buffer = output
    renderer.render_result(get_command_registry().execute("help", "override"))

    lines = _lines_mentioning(buffer.getvalue(), ["/override list", "/override set", "/override remove"])
    # Usage line plus one line per example
    assert len(lines) == 4


@allure.feature("Rendering")
@allure.story("IDE table")
@allure.severity(allure.severity_level.NORMAL)
def test_ides_render_as_table_with_default_marked(output, config):
    renderer, buffer = output
    result = get_command_registry().execute("ides", config=config)

    renderer.render_result(result, default_ide=config.default_ide)

    text = buffer.getvalue()
    assert "Configured IDEs" in text
    idea_line = _lines_mentioning(text, ["IntelliJ IDEA"])[0]
    assert "*" in idea_line
    assert "*" not in _lines_mentioning(text, ["PyCharm"])[0]


@allure.feature("Rendering")
@allure.story("Messages")
@allure.severity(allure.severity_level.MINOR)
def test_error_shows_message(output):
    renderer, buffer = output
    renderer.render_result(CommandResult.error("No project root found"))
    assert "No project root found" in buffer.getvalue()
