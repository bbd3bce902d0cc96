import os

from photoalbum.consts import InputStatus
from photoalbum.projectsettings import ProjectSettingsForm, validate_input


def test_empty_name(tmp_path):
    assert validate_input("   ", str(tmp_path)) is InputStatus.EMPTY_FIELD


def test_empty_path():
    assert validate_input("album", "  ") is InputStatus.EMPTY_FIELD


def test_missing_path(tmp_path):
    missing = tmp_path / "missing"
    assert validate_input("album", str(missing)) is InputStatus.PATH_NOT_EXIST


def test_path_that_is_a_file(tmp_path):
    f = tmp_path / "file"
    f.write_text("x")
    assert validate_input("album", str(f)) is InputStatus.PATH_NOT_EXIST


def test_existing_project(tmp_path):
    (tmp_path / "album").mkdir()
    assert validate_input("album", str(tmp_path)) is InputStatus.PROJECT_EXISTS


def test_valid_with_whitespace(tmp_path):
    assert validate_input("  album ", f" {tmp_path} ") is InputStatus.VALID


def test_default_path_is_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    form = ProjectSettingsForm()
    assert form.path == os.getcwd()
    assert form.validate() is InputStatus.EMPTY_FIELD


def test_check_input_sets_tips_and_notifies(tmp_path):
    calls = []
    form = ProjectSettingsForm("", str(tmp_path), lambda: calls.append(1))
    assert form.check_input() is InputStatus.EMPTY_FIELD
    assert form.tips == "项目名称和路径不能为空"
    form.name = "album"
    assert form.check_input() is InputStatus.VALID
    assert form.tips == ""
    assert len(calls) == 2


def test_is_complete(tmp_path):
    form = ProjectSettingsForm("album", str(tmp_path))
    assert form.is_complete()
    (tmp_path / "album").mkdir()
    assert not form.is_complete()


def test_settings_trimmed(tmp_path):
    form = ProjectSettingsForm(" album ", f"{tmp_path}  ")
    assert form.settings() == ("album", str(tmp_path))


def test_browse_starts_from_current_path(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    seen = []

    def chooser(start):
        seen.append(start)
        return str(target)

    form = ProjectSettingsForm("album", str(tmp_path))
    assert form.browse(chooser) == str(target)
    assert seen == [str(tmp_path)]
    assert form.path == str(target)
    assert form.tips == ""


def test_browse_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    seen = []
    form = ProjectSettingsForm("album", str(tmp_path / "missing"))
    form.browse(lambda start: seen.append(start) or "")
    assert seen == [os.getcwd()]


def test_browse_cancel_keeps_path(tmp_path):
    form = ProjectSettingsForm("album", str(tmp_path))
    assert form.browse(lambda start: "") is None
    assert form.path == str(tmp_path)