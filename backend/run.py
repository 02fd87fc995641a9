"""
Command-line entry point: replay a transaction script against the ledger.

Usage:
    python run.py --script scenario.json
    python run.py --script scenario.json --ledger redis --events redis

Prints the step results and the resulting chats as JSON.
"""

import argparse
import asyncio
import json
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from chatnet.application.dto import ChatDTO
from chatnet.application.processor import TransactionProcessor
from chatnet.config.logging_config import setup_logging
from chatnet.domain.ports import IdentityProvider, Ledger
from chatnet.presentation.replay import ReplayScript, replay
from chatnet.setup.ioc.container import create_container
from chatnet.setup.seed import seed_chat_network


async def main(script_path: str, ledger_backend: str, event_sink: str) -> dict:
    script = ReplayScript.model_validate_json(Path(script_path).read_text(encoding="utf-8"))

    container = await create_container(ledger_backend, event_sink)
    try:
        ledger = await container.get(Ledger)
        processor = await container.get(TransactionProcessor)
        identity = await container.get(IdentityProvider)

        await seed_chat_network(ledger)
        results = await replay(script, ledger, processor, identity)

        chats = []
        for chat in await processor.list_chats():
            view = await processor.get_chat(chat.id)
            chats.append(ChatDTO.from_view(view).model_dump(mode="json"))
    finally:
        await container.close()

    return {
        "steps": [r.model_dump() for r in results],
        "chats": chats,
    }


if __name__ == "__main__":
    p = argparse.ArgumentParser(description="Replay chat network transactions")
    p.add_argument("--script", type=str, required=True, help="Path to a JSON transaction script")
    p.add_argument("--ledger", choices=["memory", "redis"], default=None, help="Ledger backend (default: LEDGER_BACKEND)")
    p.add_argument("--events", choices=["memory", "logging", "redis"], default=None, help="Event sink (default: EVENT_SINK)")
    args = p.parse_args()

    setup_logging()
    report = asyncio.run(main(args.script, args.ledger, args.events))
    print(json.dumps(report, indent=2, ensure_ascii=False))
