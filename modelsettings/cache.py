"""
    cache.py: cache backends for the cached settings attributes

    A backend implements `remember_forever(key, producer)` and `forget(key)`.
    Errors raised by a backend are not handled, they propagate to the caller.
"""
import json
import threading
import modelsettings
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """
    Cache service used by the settings accessor
    """

    def remember_forever(self, key: str, producer: Callable[[], Any]) -> Any:
        """
        Return the cached value for `key`, or call `producer` and store its result without expiry
        """
        ...

    def forget(self, key: str) -> None:
        """
        Evict `key`
        """
        ...


class InMemoryCache:
    """
    Process local cache, entries never expire
    """

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def remember_forever(self, key: str, producer: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self._data:
                modelsettings.log.debug("cache hit: %s", key)
                return self._data[key]
        modelsettings.log.debug("cache miss: %s", key)
        # the producer reads the record, don't hold the lock while it runs
        value = producer()
        with self._lock:
            return self._data.setdefault(key, value)

    def forget(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RedisCache:
    """
    Redis backed cache, the values are stored as json text.
    Use this when the records are shared between processes.
    """

    def __init__(self, client: Any, prefix: str = "") -> None:
        """
        :param client: a (synchronous) redis client
        :param prefix: prepended to all keys
        """
        self._client = client
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "", **kwargs) -> "RedisCache":
        """
        Create a client from `url`, requires the "redis" extra
        """
        import redis

        client = redis.Redis.from_url(url, decode_responses=True, **kwargs)
        return cls(client, prefix=prefix)

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def remember_forever(self, key: str, producer: Callable[[], Any]) -> Any:
        raw: Optional[str] = self._client.get(self._key(key))
        if raw is not None:
            modelsettings.log.debug("cache hit: %s", key)
            return json.loads(raw)
        modelsettings.log.debug("cache miss: %s", key)
        value = producer()
        self._client.set(self._key(key), json.dumps(value))
        return value

    def forget(self, key: str) -> None:
        self._client.delete(self._key(key))
