"""
Redis client factory shared by the Redis ledger and the Redis event sink.
"""

import logging

import redis.asyncio as redis
from chatnet.config.settings import Config

logger = logging.getLogger(__name__)


async def create_redis_client(url: str = Config.REDIS_URL) -> redis.Redis:
    """
    Create async Redis client with connection pool.

    - decode_responses=True so records come back as str, ready for json.loads

    Raises:
        redis.ConnectionError: If Redis is not reachable
    """
    client = redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
    )

    # Test connection
    await client.ping()
    logger.info(f"[Redis] Connected to {url}")

    return client

