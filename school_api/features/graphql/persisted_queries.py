"""Automatic persisted queries (Apollo APQ protocol) backed by Redis.

A client first sends only the SHA-256 of its query in
``extensions.persistedQuery``. On a miss it retries with the full query,
which is verified against the hash and stored; later requests with the
same hash execute the stored text.

Redis is an optimization: lookup and store failures are logged and the
request proceeds as on a miss.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from redis.exceptions import RedisError

from school_api.core.exceptions import AppException, UserInputError
from school_api.infra.metrics.prometheus import graphql_persisted_queries_total

if TYPE_CHECKING:
    from school_api.infra.cache import RedisCache

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 1


class PersistedQueryNotFoundError(AppException):
    """The hash is unknown; the client should resend the full query."""

    code = "PERSISTED_QUERY_NOT_FOUND"

    def __init__(self, detail: str = "PersistedQueryNotFound", **kwargs: Any) -> None:
        super().__init__(detail, **kwargs)


class PersistedQueryNotSupportedError(AppException):
    """No persisted query store is configured."""

    code = "PERSISTED_QUERY_NOT_SUPPORTED"

    def __init__(self, detail: str = "PersistedQueryNotSupported", **kwargs: Any) -> None:
        super().__init__(detail, **kwargs)


class PersistedQueryHashMismatchError(UserInputError):
    def __init__(self, detail: str = "provided sha does not match query", **kwargs: Any) -> None:
        super().__init__(detail, **kwargs)


class PersistedQueryVersionError(UserInputError):
    def __init__(self, detail: str = "Unsupported persisted query version", **kwargs: Any) -> None:
        super().__init__(detail, **kwargs)


@dataclass(frozen=True, slots=True)
class PersistedQuery:
    """The ``extensions.persistedQuery`` member of a request."""

    version: int
    sha256_hash: str

    @classmethod
    def from_extensions(cls, extensions: Mapping[str, Any] | None) -> PersistedQuery | None:
        if not extensions:
            return None
        value = extensions.get("persistedQuery")
        if not isinstance(value, Mapping):
            return None
        sha256_hash = value.get("sha256Hash")
        if not isinstance(sha256_hash, str):
            return None
        return cls(version=value.get("version"), sha256_hash=sha256_hash.lower())


def query_hash(query: str) -> str:
    return hashlib.sha256(query.encode("utf-8")).hexdigest()


class PersistedQueryStore:
    """Hash-to-query store on top of the Redis cache.

    Example:
        store = PersistedQueryStore(get_cache(), key_prefix="graphql:apq:")
        query = await store.resolve(body.query, body.extensions)
    """

    def __init__(
        self,
        cache: RedisCache | None,
        *,
        key_prefix: str = "graphql:apq:",
        ttl: int | None = None,
    ) -> None:
        self.cache = cache
        self.key_prefix = key_prefix
        self.ttl = ttl

    @property
    def enabled(self) -> bool:
        return self.cache is not None

    def key(self, sha256_hash: str) -> str:
        return f"{self.key_prefix}{sha256_hash}"

    async def get(self, sha256_hash: str) -> str | None:
        """Look up a stored query; undecodable entries are evicted."""
        if self.cache is None:
            return None

        key = self.key(sha256_hash)
        try:
            stored = await self.cache.get(key)
        except (RedisError, OSError) as e:
            graphql_persisted_queries_total.labels(result="error").inc()
            logger.warning("Persisted query lookup failed", extra={"key": key, "error": str(e)})
            return None

        if stored is None:
            graphql_persisted_queries_total.labels(result="miss").inc()
            return None

        if isinstance(stored, str):
            query = stored
        else:
            try:
                query = stored.decode("utf-8")
            except UnicodeDecodeError:
                graphql_persisted_queries_total.labels(result="miss").inc()
                logger.warning("Evicting undecodable persisted query", extra={"key": key})
                await self._evict(key)
                return None

        graphql_persisted_queries_total.labels(result="hit").inc()
        return query

    async def put(self, sha256_hash: str, query: str) -> None:
        if self.cache is None:
            return

        key = self.key(sha256_hash)
        try:
            await self.cache.set(key, query.encode("utf-8"), ttl=self.ttl)
        except (RedisError, OSError) as e:
            graphql_persisted_queries_total.labels(result="error").inc()
            logger.warning("Persisted query store failed", extra={"key": key, "error": str(e)})
            return
        graphql_persisted_queries_total.labels(result="store").inc()

    async def resolve(self, query: str | None, extensions: Mapping[str, Any] | None) -> str | None:
        """Return the query text to execute.

        Raises:
            PersistedQueryVersionError: Unknown protocol version.
            PersistedQueryNotSupportedError: Hash-only request without a store.
            PersistedQueryNotFoundError: Hash-only request for an unknown hash.
            PersistedQueryHashMismatchError: The query does not hash to the given value.
        """
        persisted = PersistedQuery.from_extensions(extensions)
        if persisted is None:
            return query

        if persisted.version != SUPPORTED_VERSION:
            raise PersistedQueryVersionError(extra={"version": persisted.version})

        if query is None:
            if not self.enabled:
                raise PersistedQueryNotSupportedError
            stored = await self.get(persisted.sha256_hash)
            if stored is None:
                raise PersistedQueryNotFoundError(extra={"sha256_hash": persisted.sha256_hash})
            return stored

        if query_hash(query) != persisted.sha256_hash:
            raise PersistedQueryHashMismatchError(extra={"sha256_hash": persisted.sha256_hash})

        await self.put(persisted.sha256_hash, query)
        return query

    async def _evict(self, key: str) -> None:
        if self.cache is None:
            return
        try:
            await self.cache.delete(key)
        except (RedisError, OSError) as e:
            logger.warning("Could not evict persisted query", extra={"key": key, "error": str(e)})


__all__ = [
    "PersistedQuery",
    "PersistedQueryHashMismatchError",
    "PersistedQueryNotFoundError",
    "PersistedQueryNotSupportedError",
    "PersistedQueryStore",
    "PersistedQueryVersionError",
    "query_hash",
]
