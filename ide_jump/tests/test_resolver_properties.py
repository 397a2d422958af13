"""
Property-based tests for executable resolution.

Tests resolution order and fallback behavior using hypothesis.
"""

import os
import stat
import tempfile
from pathlib import Path
from unittest import mock

import allure
import pytest
from hypothesis import given, settings, strategies as st

from ide_jump import resolver
from ide_jump.resolver import (
    STRATEGY_ABSOLUTE,
    STRATEGY_FALLBACK,
    STRATEGY_OVERRIDE,
    STRATEGY_SEARCH_DIR,
    STRATEGY_WHICH,
    describe_resolution,
    resolve_executable,
)


# Strategies for generating test data

def command_id_strategy():
    """Generate plausible IDE command identifiers."""
    return st.from_regex(r"[a-z][a-z0-9_-]{0,15}", fullmatch=True)


def absolute_path_strategy():
    """Generate normalized absolute POSIX paths without ~ or $."""
    return st.from_regex(r"/[a-z]{1,10}(/[a-z0-9_.-]{1,10}){0,3}", fullmatch=True).filter(
        lambda p: "/." not in p
    )


def _make_executable(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


# Overrides always win
@allure.feature("Path Resolver")
@allure.story("Override table wins")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(command_id=command_id_strategy(), override=absolute_path_strategy())
def test_override_wins_regardless_of_path(command_id, override):
    """
    For any command identifier present in the override table, resolution
    returns exactly the overridden path, whatever PATH and the search
    directories contain.
    """
    with tempfile.TemporaryDirectory() as tmp:
        _make_executable(Path(tmp) / command_id)
        with mock.patch.object(resolver.shutil, "which", return_value=str(Path(tmp) / command_id)):
            path = resolve_executable(
                command_id,
                overrides={command_id: override},
                search_dirs=[tmp],
            )

    assert path == override


@allure.feature("Path Resolver")
@allure.story("Override table wins")
@allure.severity(allure.severity_level.NORMAL)
def test_override_scenario_ignores_path():
    """command_id='idea' with an override resolves to the override, ignoring PATH."""
    with mock.patch.object(resolver.shutil, "which", return_value="/usr/bin/idea") as which:
        path, strategy = describe_resolution(
            "idea", overrides={"idea": "/opt/idea/bin/idea"}
        )

    assert path == "/opt/idea/bin/idea"
    assert strategy == STRATEGY_OVERRIDE
    which.assert_not_called()


@allure.feature("Path Resolver")
@allure.story("Override table wins")
@allure.severity(allure.severity_level.NORMAL)
def test_override_expands_home(monkeypatch, tmp_path):
    """Override values are expanded for ~ before being returned."""
    monkeypatch.setenv("HOME", str(tmp_path))
    path = resolve_executable("idea", overrides={"idea": "~/idea/bin/idea.sh"})
    assert path == str(tmp_path / "idea" / "bin" / "idea.sh")


# Absolute existing paths are returned unchanged
@allure.feature("Path Resolver")
@allure.story("Absolute executable path")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=50)
@given(name=command_id_strategy(), other=command_id_strategy())
def test_absolute_existing_path_returned_unchanged(name, other):
    """
    For any absolute, existing path passed as command_id, resolution returns
    that path unchanged, even when an override exists for a different
    identifier.
    """
    with tempfile.TemporaryDirectory() as tmp:
        exe = str(_make_executable(Path(tmp) / "bin" / name))
        overrides = {} if other == exe else {other: "/opt/elsewhere/" + other}

        path, strategy = describe_resolution(exe, overrides=overrides, search_dirs=[tmp])

    assert path == exe
    assert strategy == STRATEGY_ABSOLUTE


@allure.feature("Path Resolver")
@allure.story("Absolute executable path")
@allure.severity(allure.severity_level.NORMAL)
def test_absolute_missing_path_falls_back_to_itself(tmp_path):
    """An absolute path that does not exist is never accepted by step 2."""
    missing = str(tmp_path / "nope" / "idea")
    path, strategy = describe_resolution(missing, search_dirs=[])
    assert path == missing
    assert strategy == STRATEGY_FALLBACK


# Unknown identifiers fall back to themselves
@allure.feature("Path Resolver")
@allure.story("Fallback to bare identifier")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(suffix=st.from_regex(r"[a-z0-9]{6,12}", fullmatch=True))
def test_unknown_identifier_returned_unchanged(suffix):
    """
    For any command identifier absent from every strategy, resolution returns
    the identifier itself; never empty, never None.
    """
    command_id = f"ide-jump-missing-{suffix}"
    with tempfile.TemporaryDirectory() as tmp:
        with mock.patch.object(resolver.shutil, "which", return_value=None):
            path = resolve_executable(command_id, overrides={}, search_dirs=[tmp])

    assert path == command_id
    assert path


# PATH lookup
@allure.feature("Path Resolver")
@allure.story("PATH lookup")
@allure.severity(allure.severity_level.NORMAL)
def test_which_result_accepted_when_it_exists(tmp_path):
    exe = _make_executable(tmp_path / "pycharm")
    with mock.patch.object(resolver, "is_posix", return_value=True), \
            mock.patch.object(resolver.shutil, "which", return_value=str(exe)):
        path, strategy = describe_resolution("pycharm", search_dirs=[])

    assert path == str(exe)
    assert strategy == STRATEGY_WHICH


@allure.feature("Path Resolver")
@allure.story("PATH lookup")
@allure.severity(allure.severity_level.NORMAL)
def test_which_result_rejected_when_missing_on_disk(tmp_path):
    """A stale lookup result that no longer exists moves on to the search dirs."""
    exe = _make_executable(tmp_path / "dirs" / "pycharm")
    with mock.patch.object(resolver, "is_posix", return_value=True), \
            mock.patch.object(resolver.shutil, "which", return_value=str(tmp_path / "gone")):
        path, strategy = describe_resolution("pycharm", search_dirs=[str(tmp_path / "dirs")])

    assert path == str(exe)
    assert strategy == STRATEGY_SEARCH_DIR


@allure.feature("Path Resolver")
@allure.story("PATH lookup")
@allure.severity(allure.severity_level.NORMAL)
def test_which_skipped_on_windows(tmp_path):
    with mock.patch.object(resolver, "is_posix", return_value=False), \
            mock.patch.object(resolver.shutil, "which", return_value="/usr/bin/idea") as which:
        path, strategy = describe_resolution("idea", search_dirs=[])

    which.assert_not_called()
    assert (path, strategy) == ("idea", STRATEGY_FALLBACK)


# Search directories
@allure.feature("Path Resolver")
@allure.story("Common installation directories")
@allure.severity(allure.severity_level.NORMAL)
def test_search_dirs_tried_in_order(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    _make_executable(second / "goland")
    _make_executable(tmp_path / "third" / "goland")

    with mock.patch.object(resolver.shutil, "which", return_value=None):
        path, strategy = describe_resolution(
            "goland",
            search_dirs=[str(first), str(second), str(tmp_path / "third")],
        )

    assert path == str(second / "goland")
    assert strategy == STRATEGY_SEARCH_DIR


@allure.feature("Path Resolver")
@allure.story("Common installation directories")
@allure.severity(allure.severity_level.NORMAL)
def test_search_dirs_expand_environment(monkeypatch, tmp_path):
    exe = _make_executable(tmp_path / "toolbox" / "scripts" / "webstorm")
    monkeypatch.setenv("IDE_JUMP_TEST_ROOT", str(tmp_path))

    with mock.patch.object(resolver.shutil, "which", return_value=None):
        path = resolve_executable(
            "webstorm", search_dirs=["$IDE_JUMP_TEST_ROOT/toolbox/scripts"]
        )

    assert path == str(exe)


@allure.feature("Path Resolver")
@allure.story("Common installation directories")
@allure.severity(allure.severity_level.MINOR)
@pytest.mark.skipif(os.name == "nt", reason="POSIX home layout")
def test_search_dirs_expand_home(monkeypatch, tmp_path):
    exe = _make_executable(tmp_path / ".local" / "bin" / "clion")
    monkeypatch.setenv("HOME", str(tmp_path))

    with mock.patch.object(resolver.shutil, "which", return_value=None):
        path = resolve_executable("clion", search_dirs=["~/.local/bin"])

    assert path == str(exe)


@allure.feature("Path Resolver")
@allure.story("Common installation directories")
@allure.severity(allure.severity_level.NORMAL)
def test_unexpanded_search_dir_is_not_cwd_relative(monkeypatch, tmp_path):
    """An entry whose variable is unset must not match files under the cwd."""
    monkeypatch.delenv("IDE_JUMP_UNSET_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    _make_executable(tmp_path / "$IDE_JUMP_UNSET_ROOT" / "scripts" / "rider")

    with mock.patch.object(resolver.shutil, "which", return_value=None):
        path, strategy = describe_resolution(
            "rider", search_dirs=["$IDE_JUMP_UNSET_ROOT/scripts"]
        )

    assert (path, strategy) == ("rider", STRATEGY_FALLBACK)
