# portfolio_client/storage/base_store.py
from abc import ABC, abstractmethod

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"


class TokenStore(ABC):
    """会话 token 的键值存储，读写不加锁（后写覆盖先写）"""

    @abstractmethod
    def get(self, key):
        pass

    @abstractmethod
    def set(self, key, value):
        pass

    @abstractmethod
    def remove(self, key):
        """键不存在时静默忽略"""
        pass

    def clear(self):
        self.remove(ACCESS_TOKEN_KEY)
        self.remove(REFRESH_TOKEN_KEY)
