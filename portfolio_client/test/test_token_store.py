import json

import pytest

from portfolio_client.storage.file_store import FileTokenStore
from portfolio_client.storage.memory_store import MemoryTokenStore


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryTokenStore()
    return FileTokenStore(str(tmp_path / "cache" / "tokens.json"))


def test_set_get_remove(store):
    assert store.get("accessToken") is None
    store.set("accessToken", "a")
    store.set("refreshToken", "r")
    assert store.get("accessToken") == "a"

    store.remove("accessToken")
    assert store.get("accessToken") is None
    assert store.get("refreshToken") == "r"


def test_remove_missing_key_is_silent(store):
    store.remove("accessToken")
    assert store.get("accessToken") is None


def test_clear(store):
    store.set("accessToken", "a")
    store.set("refreshToken", "r")
    store.clear()
    assert store.get("accessToken") is None
    assert store.get("refreshToken") is None


def test_last_write_wins(store):
    store.set("accessToken", "first")
    store.set("accessToken", "second")
    assert store.get("accessToken") == "second"


def test_file_store_persists_across_instances(tmp_path):
    path = str(tmp_path / "tokens.json")
    FileTokenStore(path).set("accessToken", "a")

    assert FileTokenStore(path).get("accessToken") == "a"
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"accessToken": "a"}


def test_file_store_ignores_corrupt_cache(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text("{not json", encoding="utf-8")

    store = FileTokenStore(str(path))
    assert store.get("accessToken") is None
    store.set("accessToken", "a")
    assert store.get("accessToken") == "a"


def test_file_store_in_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    store = FileTokenStore("tokens.json")
    store.set("refreshToken", "r")
    assert (tmp_path / "tokens.json").exists()


def test_login_logout_with_file_store(backend_url, registered_user, tmp_path):
    from conftest import EMAIL, PASSWORD
    from portfolio_client.api.base import configure
    from portfolio_client.api.user_api import UserAPI

    path = str(tmp_path / "tokens.json")
    users = UserAPI(configure(backend_url, token_store=FileTokenStore(path), timeout=5))
    users.login({"email": EMAIL, "password": PASSWORD})

    # 模拟重启：新的 store 读取同一个文件
    assert FileTokenStore(path).get("accessToken")

    users.logout()
    assert FileTokenStore(path).get("accessToken") is None
    assert FileTokenStore(path).get("refreshToken") is None
