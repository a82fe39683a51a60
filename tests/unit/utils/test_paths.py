from pathlib import Path

from src.utils.paths import PROJECT_ROOT_ENV, get_project_root


def test_env_override_wins(tmp_path, monkeypatch):
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(tmp_path))

    assert get_project_root() == tmp_path.resolve()


def test_finds_repository_root(monkeypatch):
    monkeypatch.delenv(PROJECT_ROOT_ENV, raising=False)

    root = get_project_root()

    assert (root / "pyproject.toml").exists()
    assert root == Path(__file__).resolve().parents[3]
