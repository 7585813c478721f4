from __future__ import annotations

from pathlib import Path

import pytest

from parkme.scaffold import ProjectLayout, collect_project, resolve_target_directory


class FakePrompter:
    def __init__(self, name: str, overwrite: bool = False) -> None:
        self.name = name
        self.overwrite = overwrite
        self.confirm_calls: list[str] = []

    def ask_project_name(self, default: str) -> str:
        return self.name or default

    def confirm_overwrite(self, name: str) -> bool:
        self.confirm_calls.append(name)
        return self.overwrite


@pytest.mark.parametrize("name", ["park-me-app", "demo", "my project", "ünïcode"])
def test_target_directory_is_working_dir_joined_with_name(tmp_path: Path, name: str) -> None:
    assert resolve_target_directory(name, tmp_path) == tmp_path / name


def test_layout_subdirectories(tmp_path: Path) -> None:
    layout = ProjectLayout.from_name("demo", tmp_path)

    assert layout.app_dir == tmp_path / "demo" / "app"
    assert layout.data_dir == tmp_path / "demo" / "data"
    assert layout.config_file == tmp_path / "demo" / "app" / "src" / "main" / "resources" / "config.properties"


def test_uses_default_name_when_blank(tmp_path: Path) -> None:
    layout = collect_project(FakePrompter("   "), tmp_path)

    assert layout is not None
    assert layout.name == "park-me-app"
    assert layout.target_dir == tmp_path / "park-me-app"


def test_custom_default_name(tmp_path: Path) -> None:
    layout = collect_project(FakePrompter(""), tmp_path, default_name="garage")

    assert layout is not None
    assert layout.name == "garage"


def test_new_target_does_not_ask_for_confirmation(tmp_path: Path) -> None:
    prompter = FakePrompter("fresh")

    layout = collect_project(prompter, tmp_path)

    assert layout is not None
    assert prompter.confirm_calls == []
    assert not layout.target_dir.exists()


def test_declined_overwrite_leaves_target_untouched(tmp_path: Path) -> None:
    target = tmp_path / "demo"
    (target / "app").mkdir(parents=True)
    (target / "notes.txt").write_bytes(b"keep me")
    prompter = FakePrompter("demo", overwrite=False)

    layout = collect_project(prompter, tmp_path)

    assert layout is None
    assert prompter.confirm_calls == ["demo"]
    assert (target / "notes.txt").read_bytes() == b"keep me"
    assert (target / "app").is_dir()


def test_accepted_overwrite_removes_target(tmp_path: Path) -> None:
    target = tmp_path / "demo"
    (target / "app" / "src").mkdir(parents=True)
    (target / "app" / "src" / "Main.java").write_text("class Main {}")

    layout = collect_project(FakePrompter("demo", overwrite=True), tmp_path)

    assert layout is not None
    assert not target.exists()


def test_accepted_overwrite_removes_plain_file(tmp_path: Path) -> None:
    target = tmp_path / "demo"
    target.write_text("not a directory")

    layout = collect_project(FakePrompter("demo", overwrite=True), tmp_path)

    assert layout is not None
    assert not target.exists()


def test_removal_errors_propagate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "demo").mkdir()

    def _fail(path: Path) -> None:
        raise PermissionError(f"cannot remove {path}")

    monkeypatch.setattr("parkme.scaffold.collector.shutil.rmtree", _fail)

    with pytest.raises(PermissionError):
        collect_project(FakePrompter("demo", overwrite=True), tmp_path)
