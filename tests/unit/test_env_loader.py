import os
from pathlib import Path

from sfrest import env_loader
from sfrest.env_loader import load_env_files


def test_load_env_files_loads_first_existing(tmp_path, monkeypatch):
    """load_env_files should call load_dotenv on the first existing candidate."""
    env1 = tmp_path / ".env"
    env2 = tmp_path / ".dotenv"
    env1.write_text("SF_CLIENT_ID=dummy\n")
    env2.write_text("SHOULD_NOT_BE_USED=1\n")

    calls = []

    def fake_load_dotenv(path, override=False):
        calls.append(Path(path))
        return True

    monkeypatch.setattr(env_loader, "load_dotenv", fake_load_dotenv)

    assert load_env_files(candidates=[env1, env2]) == env1
    assert calls == [env1]


def test_load_env_files_no_existing_files(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(env_loader, "load_dotenv", lambda path, override=False: calls.append(path))

    assert load_env_files(candidates=[tmp_path / "missing.env"]) is None
    assert calls == []


def test_load_env_files_override(tmp_path, monkeypatch):
    monkeypatch.setenv("SF_LOGIN_URL", "https://login.salesforce.com")
    env = tmp_path / ".env"
    env.write_text("SF_LOGIN_URL=https://test.salesforce.com\n")

    load_env_files(candidates=[env])
    assert os.environ["SF_LOGIN_URL"] == "https://login.salesforce.com"

    load_env_files(candidates=[env], override=True)
    assert os.environ["SF_LOGIN_URL"] == "https://test.salesforce.com"


def test_default_candidates_use_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert env_loader.default_candidates()[0] == tmp_path / ".env"
