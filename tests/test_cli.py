"""Tests for the command line interface."""

import io
import json
import logging
from types import SimpleNamespace

import pytest

from resume_storage.main import DATABASE_ENV, main
from resume_storage.operations.save_resume import Operation as SaveResume
from resume_storage.storage import ArrayStorage
from resume_storage.utils import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(DATABASE_ENV, raising=False)
    yield
    # Закрываем файловый лог в tmp_path
    logger = logging.getLogger("resume_storage")
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()


@pytest.fixture
def run(tmp_path, capsys):
    def runner(*args):
        rv = main(["-c", str(tmp_path), *args])
        return rv, capsys.readouterr()

    return runner


@pytest.fixture
def resume_file(tmp_path, full_resume):
    path = tmp_path / "resume.json"
    path.write_text(
        json.dumps(full_resume.to_dict(), ensure_ascii=False), encoding="utf-8"
    )
    return path


def test_no_command(run):
    rv, _ = run()

    assert rv == 2


def test_save_and_show(run, resume_file, full_resume):
    rv, captured = run("save-resume", str(resume_file))
    assert not rv
    assert captured.out.strip() == full_resume.uuid

    rv, captured = run("resume-info", full_resume.uuid)
    assert not rv
    assert json.loads(captured.out) == full_resume.to_dict()


def test_save_existing_fails(run, resume_file):
    run("save-resume", str(resume_file))

    rv, captured = run("save-resume", str(resume_file))

    assert rv == 1
    assert "already exists" in captured.err


def test_update(run, tmp_path, resume_file, full_resume):
    run("save-resume", str(resume_file))
    data = full_resume.to_dict()
    data["full_name"] = "Новое Имя"
    data["sections"] = {}
    path = tmp_path / "updated.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    rv, _ = run("save-resume", "--update", str(path))
    assert not rv

    _, captured = run("resume-info", full_resume.uuid)
    shown = json.loads(captured.out)
    assert shown["full_name"] == "Новое Имя"
    assert shown["sections"] == {}


def test_list_and_count(run, resume_file, full_resume):
    rv, captured = run("list-resumes")
    assert not rv
    assert "No resumes found." in captured.out

    run("save-resume", str(resume_file))

    _, captured = run("list-resumes")
    assert full_resume.uuid in captured.out
    assert full_resume.full_name in captured.out

    _, captured = run("count-resumes")
    assert captured.out.strip() == "1"


def test_delete(run, resume_file, full_resume):
    run("save-resume", str(resume_file))

    rv, _ = run("delete-resume", full_resume.uuid)
    assert not rv

    rv, captured = run("resume-info", full_resume.uuid)
    assert rv == 1
    assert "not found" in captured.err


def test_clear(run, resume_file, monkeypatch):
    run("save-resume", str(resume_file))

    monkeypatch.setattr("builtins.input", lambda _: "n")
    rv, _ = run("clear-storage")
    assert rv == 1

    rv, _ = run("clear-storage", "--yes")
    assert not rv

    _, captured = run("count-resumes")
    assert captured.out.strip() == "0"


def test_database_option(run, tmp_path, resume_file):
    db = tmp_path / "other.sqlite3"

    run("--database", str(db), "save-resume", str(resume_file))

    assert db.exists()
    _, captured = run("count-resumes")
    assert captured.out.strip() == "0"


def test_database_from_env(run, tmp_path, resume_file, monkeypatch):
    db = tmp_path / "env.sqlite3"
    monkeypatch.setenv(DATABASE_ENV, str(db))

    run("save-resume", str(resume_file))

    assert db.exists()


def test_invalid_json(run, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")

    rv, captured = run("save-resume", str(path))

    assert rv == 1
    assert "Invalid JSON" in captured.err


def test_database_from_config(run, tmp_path, resume_file):
    db = tmp_path / "from-config.sqlite3"
    (tmp_path / "config.json").write_text(
        json.dumps({"database": str(db)}), encoding="utf-8"
    )

    run("save-resume", str(resume_file))

    assert db.exists()
    assert not (tmp_path / "resumes.sqlite3").exists()


def test_log_file_written(run, tmp_path, resume_file):
    run("-vv", "save-resume", str(resume_file))

    log = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert "INSERT INTO resume" in log
    # Почта из контактов маскируется
    assert "gkislin@yandex.ru" not in log


def test_clear_is_logged(run, tmp_path, resume_file):
    run("save-resume", str(resume_file))

    run("-vv", "clear-storage", "--yes")

    log = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert "DELETE FROM contact" in log
    assert "DELETE FROM resume" in log


def test_save_closes_file(full_resume, capsys):
    fp = io.StringIO(json.dumps(full_resume.to_dict(), ensure_ascii=False))
    tool = SimpleNamespace(
        args=SimpleNamespace(file=fp, update=False), storage=ArrayStorage()
    )

    SaveResume().run(tool)

    assert fp.closed
    assert tool.storage.get(full_resume.uuid) == full_resume
    assert capsys.readouterr().out.strip() == full_resume.uuid


def test_save_closes_file_on_error():
    fp = io.StringIO("{")
    tool = SimpleNamespace(
        args=SimpleNamespace(file=fp, update=False), storage=ArrayStorage()
    )

    with pytest.raises(ValueError, match="Invalid JSON"):
        SaveResume().run(tool)

    assert fp.closed


class TestConfig:
    def test_missing_file(self, tmp_path):
        config = Config(tmp_path / "config.json")

        assert config == {}
        assert config["database"] is None

    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"database": "/tmp/resumes.db"}', encoding="utf-8")

        assert Config(path)["database"] == "/tmp/resumes.db"
