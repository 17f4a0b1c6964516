import pytest

from portfolio_client.result import LocalError, Ok, RemoteError, capture


def test_ok(gold, backend_app):
    outcome = capture(gold.get_gold_assets)
    assert isinstance(outcome, Ok)
    assert outcome.payload["data"] == backend_app.config["ASSETS"]["gold"]


def test_remote_error(crypto, backend_app):
    backend_app.config["FORCED_RESPONSES"]["/cryptocurrency/assets"] = (503, {"message": "X"})
    assert capture(crypto.get_cryptocurrency_assets) == RemoteError({"message": "X"}, 503)


def test_local_missing_token(users, request_log):
    outcome = capture(users.get_current_user)
    assert outcome == LocalError("missing_token", "Access token not found")
    assert request_log == []


def test_local_logout_failed(users, token_store, backend_app):
    token_store.set("accessToken", "a")
    backend_app.config["FORCED_RESPONSES"]["/users/logout"] = (500, {"message": "X"})
    assert capture(users.logout) == LocalError("logout_failed", "Logout failed")


def test_arguments_are_forwarded(users, registered_user):
    from conftest import EMAIL, PASSWORD

    outcome = capture(users.login, {"email": EMAIL, "password": PASSWORD})
    assert isinstance(outcome, Ok)


def test_other_exceptions_propagate():
    def boom():
        raise KeyError("not a client error")

    with pytest.raises(KeyError):
        capture(boom)
