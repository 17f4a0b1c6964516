# portfolio_client/storage/memory_store.py
from portfolio_client.storage.base_store import TokenStore


class MemoryTokenStore(TokenStore):
    """进程内存储，进程退出即失效"""

    def __init__(self, initial=None):
        self._values = dict(initial or {})

    def get(self, key):
        return self._values.get(key)

    def set(self, key, value):
        self._values[key] = value

    def remove(self, key):
        self._values.pop(key, None)

    def __repr__(self):
        return f"MemoryTokenStore(keys={sorted(self._values)})"
