"""
Seed data - records no transaction creates.

The chat network singleton and the registered users are written here,
usually once at startup. Both functions are safe to run again: records
that already exist are left untouched.
"""

import logging
from typing import Iterable

from chatnet.config.settings import Config
from chatnet.domain.entities import ChatNetwork, User
from chatnet.domain.ports import Ledger
from chatnet.domain.value_objects import ChatNetworkId

logger = logging.getLogger(__name__)


async def seed_chat_network(
    ledger: Ledger,
    network_id: str = Config.CHAT_NETWORK_ID,
    name: str = Config.CHAT_NETWORK_NAME,
) -> ChatNetworkId:
    ref = ChatNetworkId(network_id)
    async with ledger.transaction() as uow:
        if await uow.chat_networks.exists(ref):
            logger.debug(f"[Seed] chat network {network_id} already present")
        else:
            await uow.chat_networks.add(ChatNetwork(id=ref, name=name))
            logger.info(f"[Seed] created chat network {network_id} ({name})")
    return ref


async def seed_users(ledger: Ledger, users: Iterable[User]) -> int:
    """Register users that are not in the ledger yet. Returns how many were added."""
    added = 0
    async with ledger.transaction() as uow:
        for user in users:
            if await uow.users.exists(user.id):
                continue
            await uow.users.add(user)
            added += 1
    logger.info(f"[Seed] registered {added} user(s)")
    return added
