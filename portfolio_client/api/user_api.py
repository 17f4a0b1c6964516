# portfolio_client/api/user_api.py
import logging
import os
from contextlib import ExitStack, contextmanager

from portfolio_client.api import endpoints
from portfolio_client.errors import (
    LogoutFailedError,
    MissingTokenError,
    PortfolioClientError,
    TransportError,
)
from portfolio_client.storage.base_store import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY

logger = logging.getLogger(__name__)


def _token_from(body, key):
    """后端响应包在 data 里，兼容直接放在顶层的情况"""
    if not isinstance(body, dict):
        return None
    data = body.get("data")
    if isinstance(data, dict) and data.get(key):
        return data[key]
    return body.get(key)


@contextmanager
def _file_part(value):
    """本地路径会被打开并在请求结束后关闭；bytes、文件对象、元组原样交给 requests"""
    if isinstance(value, (str, os.PathLike)):
        path = os.fspath(value)
        with open(path, "rb") as f:
            yield (os.path.basename(path), f)
    else:
        yield value


class UserAPI:
    """用户认证与资料接口"""

    def __init__(self, api):
        self.api = api
        self.tokens = api.tokens

    # ---------- 身份认证 ----------
    def login(self, user_data):
        try:
            body = self.api.call(endpoints.LOGIN, json=user_data)
        except TransportError as e:
            raise TransportError(f"Failed to login: {e}") from e

        access_token = _token_from(body, ACCESS_TOKEN_KEY)
        refresh_token = _token_from(body, REFRESH_TOKEN_KEY)
        if not access_token or not refresh_token:
            raise MissingTokenError("Access token or refresh token not provided")

        self.api.set_token(access_token)
        self.tokens.set(REFRESH_TOKEN_KEY, refresh_token)
        return body

    def register(self, user_data, avatar=None, cover_image=None):
        """带头像/封面时以 multipart 提交，否则提交 JSON"""
        uploads = {"avatar": avatar, "coverImage": cover_image}
        uploads = {field: value for field, value in uploads.items() if value is not None}
        if not uploads:
            return self.api.call(endpoints.REGISTER, json=user_data)

        with ExitStack() as stack:
            files = {field: stack.enter_context(_file_part(value)) for field, value in uploads.items()}
            return self.api.call(endpoints.REGISTER, data=user_data, files=files)

    def logout(self):
        access_token = self.api.access_token()

        # 先清本地 token，无论请求成败都视为已登出
        self.tokens.clear()
        self.api.clear_token()

        try:
            return self.api.call(endpoints.LOGOUT, token=access_token, json={})
        except PortfolioClientError as e:
            logger.error("Error logging out: %s", e)
            raise LogoutFailedError("Logout failed") from None

    def refresh_access_token(self):
        body = self.api.call(endpoints.REFRESH_TOKEN, json={
            "refreshToken": self.tokens.get(REFRESH_TOKEN_KEY),
        })
        access_token = _token_from(body, ACCESS_TOKEN_KEY)
        if not access_token:
            raise MissingTokenError("Access token not provided")
        self.api.set_token(access_token)
        return body

    def change_current_password(self, password_data):
        return self.api.call(endpoints.CHANGE_PASSWORD, json=password_data)

    # ---------- 用户资料 ----------
    def get_current_user(self):
        access_token = self.api.access_token()
        try:
            return self.api.call(endpoints.CURRENT_USER, token=access_token)
        except TransportError as e:
            raise TransportError(f"Failed to fetch user data: {e}") from e

    def update_account_details(self, account_data):
        return self.api.call(endpoints.UPDATE_ACCOUNT, json=account_data)

    def update_user_avatar(self, avatar):
        return self._upload(endpoints.UPDATE_AVATAR, avatar)

    def update_user_cover_image(self, cover_image):
        return self._upload(endpoints.UPDATE_COVER_IMAGE, cover_image)

    def _upload(self, endpoint, value):
        with _file_part(value) as part:
            return self.api.call(endpoint, files={endpoint.multipart_field: part})
