import socket
import threading
from contextlib import ExitStack, contextmanager

import pytest
from werkzeug.serving import make_server

from fake_backend.app import create_app
from portfolio_client.api.asset_api import BuySellAPI, CryptoAPI, GoldAPI
from portfolio_client.api.base import configure
from portfolio_client.api.user_api import UserAPI
from portfolio_client.storage.memory_store import MemoryTokenStore

USERNAME = "alice"
EMAIL = "alice@example.com"
PASSWORD = "123456"


@contextmanager
def serve(app):
    """在后台线程里用真实端口跑 Flask app，返回 base url"""
    server = make_server("127.0.0.1", 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        thread.join(timeout=5)


@pytest.fixture
def backend_app():
    return create_app()


@pytest.fixture
def backend_url(backend_app):
    with serve(backend_app) as url:
        yield url


@pytest.fixture
def make_backend():
    """按需启动多个后端，用于探活顺序测试"""
    with ExitStack() as stack:
        def _make(**kwargs):
            app = create_app(**kwargs)
            return app, stack.enter_context(serve(app))
        yield _make


@pytest.fixture
def dead_url():
    """一个没有进程监听的本地地址"""
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}"


@pytest.fixture
def request_log(backend_app):
    return backend_app.config["REQUEST_LOG"]


@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
def api(backend_url, token_store):
    handle = configure(backend_url, token_store=token_store, timeout=5)
    yield handle
    handle.close()


@pytest.fixture
def users(api):
    return UserAPI(api)


@pytest.fixture
def gold(api):
    return GoldAPI(api)


@pytest.fixture
def crypto(api):
    return CryptoAPI(api)


@pytest.fixture
def buysell(api):
    return BuySellAPI(api)


@pytest.fixture
def registered_user(backend_app):
    user, err = backend_app.config["USER_SERVICE"].register(USERNAME, EMAIL, PASSWORD, "Alice Liddell")
    assert err is None
    return user


@pytest.fixture
def logged_in(users, registered_user):
    """注册并登录，token 写入 token_store"""
    return users.login({"email": EMAIL, "password": PASSWORD})
