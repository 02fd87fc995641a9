"""
ChatNetworkId Value Object - key of the network singleton.
"""

from dataclasses import dataclass
from typing import ClassVar

from chatnet.domain.value_objects.entity_ref import EntityRef


@dataclass(frozen=True)
class ChatNetworkId(EntityRef):
    entity_type: ClassVar[str] = "ChatNet"
