"""
Property-based tests for IDE command construction and launching.
"""

import tempfile
from pathlib import Path
from unittest import mock

import allure
import pytest
from hypothesis import given, settings, strategies as st

from ide_jump import launcher
from ide_jump.errors import ErrorType
from ide_jump.launcher import build_command, launch_ide, launch_request
from ide_jump.models import JumpRequest


class FakePopen:
    """Records Popen calls without starting anything."""

    calls = []

    def __init__(self, argv, **kwargs):
        self.argv = argv
        self.kwargs = kwargs
        self.pid = 4242
        self.returncode = None
        FakePopen.calls.append(self)


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.calls = []
    monkeypatch.setattr(launcher.subprocess, "Popen", FakePopen)
    return FakePopen


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "proj"
    root.mkdir()
    source = root / "a.py"
    source.write_text("print('hi')\n")
    return root, source


# Argument ordering
@allure.feature("Command Launcher")
@allure.story("Project root precedes file arguments")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(
    line=st.integers(min_value=1, max_value=10**6),
    column=st.integers(min_value=0, max_value=10**4),
    exe=st.from_regex(r"[a-z][a-z0-9/_-]{0,20}", fullmatch=True),
)
def test_project_root_strictly_before_line_token(line, column, exe):
    """
    When both project_root and file_path are supplied, the project-root
    argument appears strictly before the --line token.
    """
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        source = root / "main.py"
        source.write_text("")

        argv = build_command(exe, project_root=root, file_path=source, line=line, column=column)

    assert argv[0] == exe
    assert argv.index(str(root.absolute())) < argv.index("--line")
    assert argv[-5:] == ["--line", str(line), "--column", str(column), str(source.absolute())]


@allure.feature("Command Launcher")
@allure.story("Project root precedes file arguments")
@allure.severity(allure.severity_level.CRITICAL)
def test_full_scenario(project):
    root, source = project
    argv = build_command("idea", project_root=root, file_path=source, line=10, column=4)
    assert argv == ["idea", str(root), "--line", "10", "--column", "4", str(source)]


# Group omission
@allure.feature("Command Launcher")
@allure.story("Argument groups omitted independently")
@allure.severity(allure.severity_level.CRITICAL)
def test_project_only_scenario(project):
    root, _ = project
    assert build_command("idea", project_root=root) == ["idea", str(root)]


@allure.feature("Command Launcher")
@allure.story("Argument groups omitted independently")
@allure.severity(allure.severity_level.NORMAL)
def test_missing_file_omits_file_group(project, tmp_path):
    root, _ = project
    argv = build_command("idea", project_root=root, file_path=tmp_path / "missing.py", line=3)
    assert argv == ["idea", str(root)]
    assert "--line" not in argv and "--column" not in argv


@allure.feature("Command Launcher")
@allure.story("Argument groups omitted independently")
@allure.severity(allure.severity_level.NORMAL)
def test_non_directory_root_omits_project_group(project):
    _, source = project
    argv = build_command("idea", project_root=source, file_path=source, line=2, column=1)
    assert argv == ["idea", "--line", "2", "--column", "1", str(source)]


@allure.feature("Command Launcher")
@allure.story("Argument groups omitted independently")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(
    with_root=st.booleans(),
    with_file=st.booleans(),
    root_exists=st.booleans(),
    file_exists=st.booleans(),
)
def test_groups_present_only_when_paths_exist(with_root, with_file, root_exists, file_exists):
    """Each group appears exactly when its path is given and exists."""
    with tempfile.TemporaryDirectory() as tmp:
        base = Path(tmp)
        root = base / "root"
        source = base / "file.py"
        if root_exists:
            root.mkdir()
        if file_exists:
            source.write_text("")

        argv = build_command(
            "ide",
            project_root=root if with_root else None,
            file_path=source if with_file else None,
        )

    expect_root = with_root and root_exists
    expect_file = with_file and file_exists
    assert (str(root.absolute()) in argv) == expect_root
    assert ("--line" in argv) == expect_file
    assert ("--column" in argv) == expect_file
    assert len(argv) == 1 + (1 if expect_root else 0) + (5 if expect_file else 0)


# Launching
@allure.feature("Command Launcher")
@allure.story("Detached launch")
@allure.severity(allure.severity_level.CRITICAL)
def test_launch_spawns_detached_process(fake_popen, project):
    root, source = project
    result = launch_ide("/opt/idea/bin/idea", project_root=root, file_path=source, line=7, column=3)

    assert result.success
    assert result.pid == 4242
    assert len(fake_popen.calls) == 1

    call = fake_popen.calls[0]
    assert call.argv == result.argv
    assert call.argv[:2] == ["/opt/idea/bin/idea", str(root)]
    assert call.kwargs["stdout"] is launcher.subprocess.DEVNULL
    assert call.kwargs["stderr"] is launcher.subprocess.DEVNULL
    assert call.kwargs.get("start_new_session") or call.kwargs.get("creationflags")


@allure.feature("Command Launcher")
@allure.story("Detached launch")
@allure.severity(allure.severity_level.NORMAL)
def test_launch_logs_assembled_command_line(fake_popen, project, caplog):
    root, source = project
    with caplog.at_level("INFO", logger="ide_jump.launcher"):
        result = launch_ide("idea", project_root=root, file_path=source, line=10, column=4)

    assert result.command_line in caplog.text
    assert "--line 10 --column 4" in caplog.text


@allure.feature("Command Launcher")
@allure.story("Detached launch")
@allure.severity(allure.severity_level.NORMAL)
def test_launch_request_uses_request_fields(fake_popen, project):
    root, source = project
    request = JumpRequest(command_id="idea", project_root=root, file_path=source, line=5, column=2)

    result = launch_request(request, "/usr/local/bin/idea")

    assert result.argv == [
        "/usr/local/bin/idea", str(root), "--line", "5", "--column", "2", str(source)
    ]


# Failure semantics
@allure.feature("Command Launcher")
@allure.story("Launch failure is reported, not raised")
@allure.severity(allure.severity_level.CRITICAL)
def test_missing_executable_returns_failure(project, tmp_path):
    root, source = project
    missing = str(tmp_path / "no-such-ide")

    result = launch_ide(missing, project_root=root, file_path=source)

    assert not result.success
    assert result.pid is None
    assert result.error.error_type == ErrorType.LAUNCH_FAILURE
    assert missing in result.error.message
    assert result.argv[0] == missing


@allure.feature("Command Launcher")
@allure.story("Launch failure is reported, not raised")
@allure.severity(allure.severity_level.NORMAL)
def test_permission_error_returns_failure(monkeypatch, project):
    root, _ = project

    def deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(launcher.subprocess, "Popen", deny)

    result = launch_ide("idea", project_root=root)

    assert not result.success
    assert "Permission denied" in result.error.message
    assert result.error.remediation_steps
