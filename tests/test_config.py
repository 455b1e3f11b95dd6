from pathlib import Path

from podannouncer.config import config_path, load_settings


def test_defaults():
    settings = load_settings()
    assert settings.hostname == ""
    assert settings.etcd == "http://etcd:2379"
    assert settings.ip == ""


def test_config_file(tmp_path):
    path = tmp_path / "announcer.yaml"
    path.write_text("etcd: http://file:2379\nhostname: from-file\nunrelated: 1\n")

    settings = load_settings(str(path))
    assert settings.etcd == "http://file:2379"
    assert settings.hostname == "from-file"
    assert settings.ip == ""


def test_env_beats_file(tmp_path, monkeypatch):
    path = tmp_path / "announcer.yaml"
    path.write_text("etcd: http://file:2379\n")
    monkeypatch.setenv("ETCD", "http://env:2379")

    assert load_settings(str(path)).etcd == "http://env:2379"


def test_flag_beats_env(tmp_path, monkeypatch):
    monkeypatch.setenv("ETCD", "http://env:2379")
    monkeypatch.setenv("IP", "10.9.9.9")

    settings = load_settings(etcd="http://flag:2379")
    assert settings.etcd == "http://flag:2379"
    assert settings.ip == "10.9.9.9"


def test_missing_config_file_is_ignored(tmp_path):
    settings = load_settings(str(tmp_path / "nope.yaml"))
    assert settings.etcd == "http://etcd:2379"


def test_default_config_file_in_home(tmp_path):
    assert config_path() == tmp_path / ".skydns-pod-announcer.yaml"

    (tmp_path / ".skydns-pod-announcer.yaml").write_text("etcd: http://home:2379\n")
    assert load_settings().etcd == "http://home:2379"


def test_no_home_directory(monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.delenv("HOME")
    monkeypatch.setattr(Path, "home", no_home)

    assert config_path() is None
    assert load_settings(etcd="http://flag:2379").etcd == "http://flag:2379"
