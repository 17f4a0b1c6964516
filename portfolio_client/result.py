"""
标签化结果类型：Ok | RemoteError | LocalError

给不想依赖异常类型做分支的调用方使用：

    outcome = capture(client.gold.get_gold_assets)
    if isinstance(outcome, Ok):
        ...
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from portfolio_client.errors import APIError, PortfolioClientError


@dataclass(frozen=True)
class Ok:
    payload: Any


@dataclass(frozen=True)
class RemoteError:
    body: Any
    status_code: Optional[int] = None


@dataclass(frozen=True)
class LocalError:
    kind: str
    message: str


Result = Union[Ok, RemoteError, LocalError]


def capture(func: Callable[..., Any], *args, **kwargs) -> Result:
    """调用 func 并把客户端异常转换成结果对象，其他异常照常抛出"""
    try:
        return Ok(func(*args, **kwargs))
    except APIError as e:
        return RemoteError(e.payload, e.status_code)
    except PortfolioClientError as e:
        return LocalError(e.kind, str(e))
