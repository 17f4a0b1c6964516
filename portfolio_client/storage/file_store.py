# portfolio_client/storage/file_store.py
import json
import logging
import os

from portfolio_client.config import Config
from portfolio_client.storage.base_store import TokenStore

logger = logging.getLogger(__name__)


class FileTokenStore(TokenStore):
    """JSON 文件存储，重启后仍然保留登录状态"""

    def __init__(self, path=None):
        self.path = path or Config.TOKEN_PATH

    def get(self, key):
        return self._load().get(key)

    def set(self, key, value):
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove(self, key):
        data = self._load()
        if data.pop(key, None) is not None:
            self._dump(data)

    # ---------- 本地缓存 ----------
    def _load(self):
        # 每次都重新读取，其他进程写入的 token 也能看到
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                logger.warning("Token cache %s is not valid JSON, ignoring it", self.path)
                return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)
