"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Chat network singleton
    CHAT_NETWORK_ID = os.getenv("CHAT_NETWORK_ID", "mainchatnetid001")
    CHAT_NETWORK_NAME = os.getenv("CHAT_NETWORK_NAME", "Main Chat Network 001")
    CHAT_NAMESPACE = os.getenv("CHAT_NAMESPACE", "org.miluxas.chatnet2")

    # Ledger backend: "memory" or "redis"
    LEDGER_BACKEND = os.getenv("LEDGER_BACKEND", "memory").lower()

    # Redis
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    REDIS_KEY_PREFIX = os.getenv("REDIS_KEY_PREFIX", "chatnet")
    REDIS_LOCK_TIMEOUT = float(os.getenv("REDIS_LOCK_TIMEOUT", "10"))
    REDIS_LOCK_BLOCKING_TIMEOUT = float(os.getenv("REDIS_LOCK_BLOCKING_TIMEOUT", "5"))

    # Events: "memory", "logging" or "redis"
    EVENT_SINK = os.getenv("EVENT_SINK", "logging").lower()
    REDIS_EVENT_CHANNEL = os.getenv("REDIS_EVENT_CHANNEL", "chatnet:events")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] [tx=%(transaction_id)s] %(message)s",
    )
