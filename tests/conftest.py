from __future__ import annotations

from pathlib import Path

import pytest

from recall.storage.store import Store


class FakeEditor:
    def __init__(self, result: str = "") -> None:
        self.result = result
        self.calls: list[str] = []

    def edit_text(self, initial: str) -> str:
        self.calls.append(initial)
        return self.result


class FakeOpener:
    def __init__(self) -> None:
        self.targets: list[str] = []

    def open(self, target: str) -> None:
        self.targets.append(target)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    monkeypatch.delenv("RECALL_CONFIG", raising=False)
    monkeypatch.delenv("RECALL_DB_PATH", raising=False)
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "data" / "notes.db"


@pytest.fixture
def store(db_path):
    with Store.open(db_path) as opened:
        yield opened


@pytest.fixture
def editor() -> FakeEditor:
    return FakeEditor()


@pytest.fixture
def opener() -> FakeOpener:
    return FakeOpener()
