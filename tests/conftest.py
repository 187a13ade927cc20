import pytest

from wolfy import config
from wolfy.search.models import SearchableItem

_ENV_VARS = (
    "WOLFY_DIR",
    "WOLFY_HISTORY",
    "WOLFY_MANIFEST",
    "WOLFY_MAX_RESULTS",
    "WOLFY_FUZZY",
    "WOLFY_HISTORY_WEIGHT",
    "WOLFY_HISTORY_MAX_ENTRIES",
    "WOLFY_HISTORY_LOCK_TIMEOUT",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at a temp dir and clear WOLFY_* overrides for every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("WOLFY_DIR", str(tmp_path / "wolfy-home"))
    config.reload()
    yield
    monkeypatch.undo()
    config.reload()


@pytest.fixture
def apps():
    return [
        SearchableItem.create("Chrome", "/chrome.exe"),
        SearchableItem.create("Firefox", "/firefox.exe"),
        SearchableItem.create("Visual Studio Code", "/code.exe"),
        SearchableItem.create("Visual Studio 2022", "/vs.exe"),
        SearchableItem.create("Notepad", "/notepad.exe"),
    ]


@pytest.fixture
def by_name(apps):
    return {item.name: item for item in apps}
