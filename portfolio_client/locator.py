"""
后端地址探测

按候选顺序（开发 -> 生产）逐个做健康检查，返回第一个可用的地址。
严格串行：前一个健康就不再探测后面的候选。
"""
import logging

import requests

from portfolio_client.api.base import decode_body
from portfolio_client.config import Config
from portfolio_client.errors import NoAccessibleBackendError

logger = logging.getLogger(__name__)

HEALTH_PATH = "/users/help"
HEALTH_MESSAGE = "Backend server is up and running."


def is_healthy(url, session=None, timeout=None):
    """状态码 200 且响应体与 HEALTH_MESSAGE 完全一致才算健康；网络异常视为不健康"""
    http = session or requests
    probe_url = f"{url.rstrip('/')}{HEALTH_PATH}"
    try:
        resp = http.get(probe_url, timeout=timeout or Config.HEALTH_TIMEOUT)
    except requests.RequestException as e:
        logger.error("Error accessing backend URL %s: %s", url, e)
        return False

    if resp.status_code == 200 and decode_body(resp) == HEALTH_MESSAGE:
        logger.info("Backend URL %s is accessible.", url)
        return True

    logger.error("Backend URL %s is not accessible (status %s).", url, resp.status_code)
    return False


def first_healthy(candidates, session=None, timeout=None):
    for url in candidates:
        if not url:
            continue
        if is_healthy(url, session=session, timeout=timeout):
            logger.info("Using backend URL: %s", url)
            return url
    logger.error("No accessible backend URL found.")
    raise NoAccessibleBackendError("No accessible backend URL found.")


def select_base_url(dev_url=None, prod_url=None, session=None, timeout=None):
    return first_healthy([dev_url, prod_url], session=session, timeout=timeout)


def locate_backend(config=Config, session=None):
    """用配置里的候选地址选出后端"""
    return first_healthy(config.candidate_urls(), session=session, timeout=config.HEALTH_TIMEOUT)
