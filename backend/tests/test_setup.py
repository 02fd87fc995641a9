"""
Tests for seeding, the DI container, replay and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from chatnet.application.processor import TransactionProcessor
from chatnet.config.logging_config import (
    NO_TRANSACTION,
    SafeFormatter,
    TransactionIdFilter,
    transaction_id_var,
)
from chatnet.domain.ports import EventSink, IdentityProvider, Ledger
from chatnet.domain.value_objects import ChatNetworkId
from chatnet.infrastructure.events import InMemoryEventSink, LoggingEventSink
from chatnet.infrastructure.persistence import InMemoryLedger
from chatnet.presentation.replay import ReplayScript, replay
from chatnet.setup.ioc.container import (
    InMemoryEventSinkProvider,
    RedisProvider,
    build_providers,
    create_container,
)
from chatnet.setup.seed import seed_chat_network, seed_users

from conftest import NETWORK_ID, USERS


class TestSeed:
    async def test_seeding_twice_keeps_first_records(self):
        ledger = InMemoryLedger()
        await seed_chat_network(ledger, NETWORK_ID, "first")
        await seed_chat_network(ledger, NETWORK_ID, "second")
        assert await seed_users(ledger, USERS) == len(USERS)
        assert await seed_users(ledger, USERS) == 0

        async with ledger.transaction() as uow:
            network = await uow.chat_networks.get(ChatNetworkId(NETWORK_ID))
            assert network.name == "first"
            assert len(await uow.users.get_all()) == len(USERS)


class TestContainer:
    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_providers("postgres", "memory")
        with pytest.raises(ValueError):
            build_providers("memory", "kafka")

    def test_redis_provider_only_when_needed(self):
        assert not any(isinstance(p, RedisProvider) for p in build_providers("memory", "logging"))
        assert any(isinstance(p, RedisProvider) for p in build_providers("memory", "redis"))
        assert any(isinstance(p, InMemoryEventSinkProvider) for p in build_providers("redis", "memory"))

    async def test_memory_container_wires_processor(self):
        container = await create_container("memory", "memory")
        try:
            processor = await container.get(TransactionProcessor)
            ledger = await container.get(Ledger)
            sink = await container.get(EventSink)
            identity = await container.get(IdentityProvider)

            assert isinstance(ledger, InMemoryLedger)
            assert isinstance(sink, InMemoryEventSink)
            assert processor is await container.get(TransactionProcessor)

            await seed_chat_network(ledger, NETWORK_ID)
            await seed_users(ledger, USERS)
            with identity.acting_as(USERS[0].id):
                await processor.submit(
                    {"$class": "StartNewGroupChat", "newChatId": "1", "newChatTitle": "T", "type": "PUBLIC_GROUP"}
                )
            assert sink.names() == ["ChatCreated", "NewMemberCreated"]
        finally:
            await container.close()

    async def test_logging_sink_by_name(self):
        container = await create_container("memory", "logging")
        try:
            assert isinstance(await container.get(EventSink), LoggingEventSink)
        finally:
            await container.close()


class TestReplay:
    async def test_script_steps_run_in_order(self, ledger, processor, identity):
        script = ReplayScript.model_validate(
            {
                "users": [{"id": "new@email.com", "firstName": "New", "lastName": "User"}],
                "transactions": [
                    {
                        "participant": "solivan@email.com",
                        "record": {
                            "$class": "StartNewGroupChat",
                            "newChatId": "32556",
                            "newChatTitle": "G",
                            "type": "PRIVATE_GROUP",
                        },
                    },
                    {"participant": "new@email.com", "record": {"$class": "JoinToChat", "chat": "32556"}},
                    {"participant": "new@email.com", "record": {"$class": "JoinToChat", "chat": "32556"}},
                    {"participant": "ferzin@email.com", "record": {"$class": "Unknown"}},
                ],
            }
        )

        results = await replay(script, ledger, processor, identity)

        assert [r.ok for r in results] == [True, True, False, False]
        assert results[0].result == "32556"
        assert results[2].error.startswith("InvalidStateError")
        assert results[3].error.startswith("DomainValidationError")

    async def test_bad_participant_rejects_only_its_step(self, ledger, processor, identity):
        """Test that a participant that is not a user id is reported and the replay goes on."""
        script = ReplayScript.model_validate(
            {
                "transactions": [
                    {"participant": "bob", "record": {"$class": "JoinToChat", "chat": "32556"}},
                    {
                        "participant": "solivan@email.com",
                        "record": {
                            "$class": "StartNewGroupChat",
                            "newChatId": "32556",
                            "newChatTitle": "G",
                            "type": "PUBLIC_GROUP",
                        },
                    },
                ],
            }
        )

        results = await replay(script, ledger, processor, identity)

        assert [r.ok for r in results] == [False, True]
        assert results[0].participant == "bob"
        assert results[0].error.startswith("DomainValidationError")
        assert results[1].result == "32556"

    def test_bad_user_id_fails_script_validation(self):
        with pytest.raises(ValidationError):
            ReplayScript.model_validate({"users": [{"id": "bob", "firstName": "Bob"}]})


class TestLoggingConfig:
    def test_filter_stamps_current_transaction(self):
        record = logging.LogRecord("chatnet", logging.INFO, __file__, 1, "msg", None, None)
        token = transaction_id_var.set("tx-1")
        try:
            TransactionIdFilter().filter(record)
        finally:
            transaction_id_var.reset(token)
        assert record.transaction_id == "tx-1"

    def test_formatter_without_filter(self):
        record = logging.LogRecord("chatnet", logging.INFO, __file__, 1, "msg", None, None)
        text = SafeFormatter("[tx=%(transaction_id)s] %(message)s").format(record)
        assert text == f"[tx={NO_TRANSACTION}] msg"
