from photoalbum.projectsettings import ProjectSettingsForm
from photoalbum.wizard import DialogResult, Wizard


def test_accept_sends_trimmed_settings(tmp_path):
    received = []
    wizard = Wizard(ProjectSettingsForm(" album ", f" {tmp_path} "))
    wizard.connect(lambda name, path: received.append((name, path)))
    wizard.done(DialogResult.ACCEPTED)
    assert received == [("album", str(tmp_path))]
    assert wizard.result == DialogResult.ACCEPTED


def test_reject_sends_nothing(tmp_path):
    received = []
    wizard = Wizard(ProjectSettingsForm("album", str(tmp_path)))
    wizard.connect(lambda name, path: received.append((name, path)))
    wizard.done(DialogResult.REJECTED)
    assert received == []
    assert wizard.result == DialogResult.REJECTED


def test_disconnect(tmp_path):
    received = []

    def receiver(name, path):
        received.append(name)

    wizard = Wizard(ProjectSettingsForm("album", str(tmp_path)))
    wizard.connect(receiver)
    assert wizard.disconnect(receiver) is True
    assert wizard.disconnect(receiver) is False
    wizard.done(DialogResult.ACCEPTED)
    assert received == []


def test_title_and_default_form(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    wizard = Wizard()
    assert wizard.title == "创建项目"
    assert wizard.form.settings() == ("", str(tmp_path))