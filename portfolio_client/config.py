# portfolio_client/config.py
import os

from dotenv import find_dotenv, load_dotenv

# 从当前目录向上查找 .env，已存在的环境变量不会被覆盖
load_dotenv(find_dotenv(usecwd=True))


def env_value(*names, default=None):
    """按顺序返回第一个非空的环境变量"""
    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return default


class Config:
    # 后端地址：开发优先，生产兜底（兼容前端项目的 REACT_APP_ 前缀）
    BACKEND_URL_DEV = env_value("BACKEND_URL_DEV", "REACT_APP_BACKEND_URL_DEV")
    BACKEND_URL_PROD = env_value("BACKEND_URL_PROD", "REACT_APP_BACKEND_URL_PROD")

    TIMEOUT = float(env_value("PORTFOLIO_TIMEOUT", default="10"))  # 请求超时
    HEALTH_TIMEOUT = float(env_value("PORTFOLIO_HEALTH_TIMEOUT", default="3"))  # 探活超时

    TOKEN_PATH = env_value("PORTFOLIO_TOKEN_PATH", default="./.token_cache.json")
    LOG_LEVEL = env_value("PORTFOLIO_LOG_LEVEL", default="INFO").upper()

    @classmethod
    def candidate_urls(cls):
        """探活顺序：开发 -> 生产"""
        return [cls.BACKEND_URL_DEV, cls.BACKEND_URL_PROD]
