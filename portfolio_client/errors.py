"""
客户端异常定义

本地前置条件失败（无可用后端、缺少 token）在发起网络请求之前抛出；
远端失败分两类：服务端返回了错误响应（APIError，原样携带响应体），
或者根本没有收到响应（TransportError）。
"""


class PortfolioClientError(RuntimeError):
    """所有客户端异常的基类"""

    kind = "client_error"


class NoAccessibleBackendError(PortfolioClientError):
    kind = "no_accessible_backend"


class MissingTokenError(PortfolioClientError):
    kind = "missing_token"


class TransportError(PortfolioClientError):
    """没有收到任何响应（连接失败、超时等）"""

    kind = "transport"


class LogoutFailedError(PortfolioClientError):
    kind = "logout_failed"


class APIError(PortfolioClientError):
    """服务端返回错误响应，payload 为原始响应体"""

    kind = "remote"

    def __init__(self, payload, status_code=None):
        self.payload = payload
        self.status_code = status_code
        super().__init__(f"API Error ({status_code}): {payload}")

    @property
    def message(self):
        if isinstance(self.payload, dict):
            return self.payload.get("message") or self.payload.get("msg")
        if isinstance(self.payload, str):
            return self.payload
        return None
