"""
End-to-end tests through TransactionProcessor: the ledger scenarios,
atomicity of failed transactions and event delivery.
"""

import logging

import pytest

from chatnet.application.dto import ChatDTO
from chatnet.application.processor import TransactionProcessor
from chatnet.domain.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidStateError,
)
from chatnet.domain.ports import EventSink
from chatnet.domain.value_objects import ChatId, ChatNetworkId, MemberStatus

from conftest import FERZIN, NETWORK_ID, SOLIVAN

NS = "org.miluxas.chatnet2"


async def uow_chat_ids(ledger):
    async with ledger.transaction() as uow:
        return [c.id for c in await uow.chats.get_all()]


class TestScenarios:
    async def test_public_group_round_trip(self, processor, submit_as, group_chat, sink):
        """Create public group, Ferzin joins, a message is sent and deleted."""
        chat_id = await group_chat("32556", "PUBLIC_GROUP")

        member_id = await submit_as(
            FERZIN, {"$class": f"{NS}.JoinToChat", "chat": f"resource:{NS}.Chat#32556"}
        )
        view = await processor.get_chat(chat_id)
        assert len(view.members) == 2
        joined = view.members[1]
        assert joined.id == member_id
        assert joined.user == FERZIN
        assert joined.status is MemberStatus.NORMAL

        message_id = await submit_as(
            FERZIN, {"$class": f"{NS}.SendMessageToChat", "chat": "32556", "content": "salam"}
        )
        assert len((await processor.get_chat(chat_id)).chat.message_list) == 1

        await submit_as(
            SOLIVAN,
            {"$class": f"{NS}.DeleteMessage", "chat": "32556", "message": message_id.value},
        )
        assert (await processor.get_chat(chat_id)).chat.message_list == []

        assert sink.names() == [
            "ChatCreated",
            "NewMemberCreated",
            "NewMemberCreated",
            "MessageSent",
            "MessageDeleted",
        ]

    async def test_private_group_join_is_requested(self, processor, submit_as, group_chat):
        chat_id = await group_chat("32556", "PRIVATE_GROUP")
        member_id = await submit_as(FERZIN, {"$class": "JoinToChat", "chat": "32556"})

        view = await processor.get_chat(chat_id)
        requested = next(m for m in view.members if m.id == member_id)
        assert requested.status is MemberStatus.REQUESTED

    async def test_peer_chat_after_group(self, processor, submit_as, group_chat):
        await group_chat("32556")
        await submit_as(
            SOLIVAN,
            {
                "$class": f"{NS}.StartNewPeerChat",
                "newChatId": "32557",
                "newChatTitle": "Solivan and Ferzin",
                "peerUser": f"resource:{NS}.User#ferzin@email.com",
            },
        )
        chats = await processor.list_chats()
        assert [c.id.value for c in chats] == ["32556", "32557"]

    async def test_chat_dto(self, processor, submit_as, group_chat):
        chat_id = await group_chat()
        await submit_as(FERZIN, {"$class": "JoinToChat", "chat": "32556"})
        await submit_as(FERZIN, {"$class": "SendMessageToChat", "chat": "32556", "content": "hi"})

        data = ChatDTO.from_view(await processor.get_chat(chat_id)).model_dump(mode="json")
        assert data["id"] == "32556"
        assert data["uri"] == "resource:org.miluxas.chatnet2.Chat#32556"
        assert data["type"] == "PUBLIC_GROUP"
        assert [m["user"] for m in data["members"]] == ["solivan@email.com", "ferzin@email.com"]
        assert data["messages"][0]["content"] == "hi"


class TestAtomicity:
    """Test that a rejected transaction leaves no writes and no events."""

    async def test_failed_join_writes_nothing(self, ledger, processor, submit_as, group_chat, sink):
        chat_id = await group_chat()
        await submit_as(FERZIN, {"$class": "JoinToChat", "chat": "32556"})
        async with ledger.transaction() as uow:
            members_before = len(await uow.members.get_all())
        sink.clear()

        with pytest.raises(InvalidStateError):
            await submit_as(FERZIN, {"$class": "JoinToChat", "chat": "32556"})

        async with ledger.transaction() as uow:
            assert len(await uow.members.get_all()) == members_before
        assert len((await processor.get_chat(chat_id)).chat.member_list) == 2
        assert sink.events == []

    async def test_failure_after_staged_writes(self, ledger, submit_as, group_chat, sink):
        """Test that writes staged before the failing step are dropped too."""
        chat_id = await group_chat()
        async with ledger.transaction() as uow:
            network = await uow.chat_networks.get(ChatNetworkId(NETWORK_ID))
            network.chat_list.append(ChatId("ghost"))
            await uow.chat_networks.update(network)
        sink.clear()

        # members are staged before the network rejects the duplicate entry
        with pytest.raises(EntityAlreadyExistsError):
            await submit_as(
                SOLIVAN,
                {"$class": "StartNewGroupChat", "newChatId": "ghost", "newChatTitle": "G", "type": "PUBLIC_GROUP"},
            )

        async with ledger.transaction() as uow:
            assert not await uow.chats.exists(ChatId("ghost"))
            assert len(await uow.members.get_all()) == 1
        assert sink.events == []
        assert (await uow_chat_ids(ledger)) == [chat_id]

    async def test_exception_inside_transaction_discards(self, ledger):
        with pytest.raises(RuntimeError):
            async with ledger.transaction() as uow:
                network = await uow.chat_networks.get(ChatNetworkId(NETWORK_ID))
                network.name = "renamed"
                await uow.chat_networks.update(network)
                raise RuntimeError("boom")

        async with ledger.transaction() as uow:
            network = await uow.chat_networks.get(ChatNetworkId(NETWORK_ID))
            assert network.name == "Main Chat Network 001"

    async def test_reads_return_copies(self, ledger, group_chat):
        chat_id = await group_chat()
        async with ledger.transaction() as uow:
            chat = await uow.chats.get(chat_id)
            chat.title = "changed without update"

        async with ledger.transaction() as uow:
            assert (await uow.chats.get(chat_id)).title == "Chat Group Test"


class BrokenSink(EventSink):
    async def publish(self, event):
        raise ConnectionError("sink down")


class TestEventDelivery:
    async def test_publish_failure_does_not_undo_commit(self, ledger, identity, caplog):
        processor = TransactionProcessor(
            ledger=ledger,
            identity=identity,
            event_sink=BrokenSink(),
            network_id=ChatNetworkId(NETWORK_ID),
        )
        with caplog.at_level(logging.ERROR, logger="chatnet.application.processor"):
            with identity.acting_as(SOLIVAN):
                chat_id = await processor.submit(
                    {"$class": "StartNewGroupChat", "newChatId": "1", "newChatTitle": "T", "type": "PUBLIC_GROUP"}
                )

        assert (await processor.get_chat(chat_id)).chat.id == ChatId("1")
        assert "failed to publish ChatCreated" in caplog.text

    async def test_events_carry_references(self, submit_as, group_chat, sink):
        await group_chat()
        member_id = await submit_as(FERZIN, {"$class": "JoinToChat", "chat": "32556"})
        event = sink.events[-1]
        assert event.to_dict()["event"] == "NewMemberCreated"
        assert event.to_dict()["new_member"] == member_id.value
        assert event.to_dict()["user"] == "ferzin@email.com"
        assert event.to_dict()["status"] == "NORMAL"

    async def test_subscriber_notified_after_commit(self, ledger, submit_as, group_chat, sink):
        seen = []

        async def on_event(event):
            async with ledger.transaction() as uow:
                seen.append((event.name, await uow.chats.exists(ChatId("32556"))))

        sink.subscribe(on_event)
        await group_chat()
        assert seen == [("ChatCreated", True), ("NewMemberCreated", True)]


class TestProcessorErrors:
    async def test_rejection_is_logged_and_reraised(self, submit_as, caplog):
        with caplog.at_level(logging.WARNING, logger="chatnet.application.processor"):
            with pytest.raises(EntityNotFoundError):
                await submit_as(SOLIVAN, {"$class": "JoinToChat", "chat": "nope"})
        assert "transaction rejected: EntityNotFoundError" in caplog.text

    async def test_get_unknown_chat(self, processor):
        with pytest.raises(EntityNotFoundError):
            await processor.get_chat(ChatId("nope"))
