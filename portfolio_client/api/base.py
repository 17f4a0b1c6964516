# portfolio_client/api/base.py
import json
import logging

import requests

from portfolio_client.api.endpoints import AUTH_BEARER, AUTH_NONE
from portfolio_client.config import Config
from portfolio_client.errors import APIError, MissingTokenError, TransportError
from portfolio_client.storage.base_store import ACCESS_TOKEN_KEY
from portfolio_client.storage.memory_store import MemoryTokenStore

logger = logging.getLogger(__name__)


def decode_body(resp):
    """JSON 响应解析为对象，其余按文本返回，空响应体返回 None"""
    if not resp.content:
        return None
    content_type = resp.headers.get("Content-Type", "")
    if "json" in content_type:
        try:
            return resp.json()
        except ValueError:
            return resp.text
    text = resp.text
    # 文本响应里带引号的 JSON 字符串也按字符串解析
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        try:
            value = json.loads(text)
        except ValueError:
            return text
        if isinstance(value, str):
            return value
    return text


class BaseAPI:
    """绑定到单个后端地址的请求句柄，所有资源接口共用同一个实例"""

    def __init__(self, base_url, token_store=None, session=None, timeout=None):
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self.tokens = token_store if token_store is not None else MemoryTokenStore()
        self.session = session or requests.Session()
        self.timeout = timeout or Config.TIMEOUT

        # 重启后沿用已保存的 token
        token = self.tokens.get(ACCESS_TOKEN_KEY)
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

    @property
    def base_url(self):
        # 选定后不可更改，不做运行期切换
        return self._base_url

    def url(self, path):
        return f"{self._base_url}{path if path.startswith('/') else '/' + path}"

    def access_token(self):
        """读取已保存的 access token，不存在时抛出 MissingTokenError"""
        token = self.tokens.get(ACCESS_TOKEN_KEY)
        if not token:
            raise MissingTokenError("Access token not found")
        return token

    def set_token(self, token):
        """保存 access token 并更新客户端级 Authorization 头"""
        self.tokens.set(ACCESS_TOKEN_KEY, token)
        self.session.headers.update({"Authorization": f"Bearer {token}"})

    def clear_token(self):
        self.session.headers.pop("Authorization", None)

    def request(self, method, path, token=None, headers=None, **kwargs):
        """封装统一请求逻辑：2xx 返回响应体，错误响应抛 APIError，无响应抛 TransportError"""
        headers = dict(headers or {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = self.url(path)
        try:
            resp = self.session.request(method, url, headers=headers or None,
                                        timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.debug("%s %s failed without response: %s", method, url, e)
            raise TransportError(str(e)) from e

        body = decode_body(resp)
        if not 200 <= resp.status_code < 300:
            logger.debug("%s %s -> %s", method, url, resp.status_code)
            raise APIError(body, resp.status_code)
        return body

    def call(self, endpoint, token=None, headers=None, **kwargs):
        """按端点描述发起请求；Bearer 端点必须传入 token，无认证端点不带客户端级 Authorization 头"""
        if endpoint.auth == AUTH_BEARER and not token:
            raise MissingTokenError("Access token not found")
        if endpoint.auth == AUTH_NONE:
            # 值为 None 时 requests 会去掉 session 上的同名请求头
            headers = dict(headers or {}, Authorization=None)
        return self.request(endpoint.method, endpoint.path, token=token, headers=headers, **kwargs)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return f"BaseAPI(base_url={self._base_url!r})"


def configure(base_url, token_store=None, session=None, timeout=None):
    """创建请求句柄，不发起任何网络请求"""
    return BaseAPI(base_url, token_store=token_store, session=session, timeout=timeout)
