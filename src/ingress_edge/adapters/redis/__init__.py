"""Redis adapter – connections, key-value store, rate limiter, health check."""
from ingress_edge.adapters.redis.connection import RedisConnection
from ingress_edge.adapters.redis.health import RedisHealthCheck
from ingress_edge.adapters.redis.rate_limiter import RedisRateLimiter
from ingress_edge.adapters.redis.store import RedisKeyValueStore

__all__ = ["RedisConnection", "RedisHealthCheck", "RedisKeyValueStore", "RedisRateLimiter"]
