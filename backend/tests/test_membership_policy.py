"""
Unit tests for the membership state machine and admission rules.
"""

import pytest

from chatnet.domain.entities import Chat, Member
from chatnet.domain.exceptions import AccessDeniedError, InvalidStateError
from chatnet.domain.services import membership_policy
from chatnet.domain.value_objects import (
    ChatId,
    ChatType,
    MemberStatus,
    MemberType,
    UserId,
)

OWNER = UserId("solivan@email.com")
OTHER = UserId("ferzin@email.com")


def make_chat(chat_type: ChatType) -> Chat:
    return Chat.create(ChatId("c1"), "Test", chat_type)


def make_member(user=OTHER, member_type=MemberType.NORMAL, status=MemberStatus.NORMAL):
    return Member.create(user=user, member_type=member_type, status=status)


class TestInitialStatus:
    @pytest.mark.parametrize(
        "chat_type,expected",
        [
            (ChatType.PUBLIC_GROUP, MemberStatus.NORMAL),
            (ChatType.PUBLIC_CHANNEL, MemberStatus.NORMAL),
            (ChatType.PRIVATE_GROUP, MemberStatus.REQUESTED),
            (ChatType.PRIVATE_CHANNEL, MemberStatus.REQUESTED),
        ],
    )
    def test_join_status_follows_chat_type(self, chat_type, expected):
        assert membership_policy.initial_join_status(make_chat(chat_type)) is expected

    def test_peer_chat_cannot_be_joined(self):
        with pytest.raises(InvalidStateError):
            membership_policy.initial_join_status(make_chat(ChatType.PEER))

    def test_added_member_is_normal_even_in_private_chat(self):
        chat = make_chat(ChatType.PRIVATE_GROUP)
        assert membership_policy.initial_added_status(chat) is MemberStatus.NORMAL

    def test_peer_chat_cannot_be_added_to(self):
        with pytest.raises(InvalidStateError):
            membership_policy.initial_added_status(make_chat(ChatType.PEER))


class TestTransitions:
    @pytest.mark.parametrize("source", [MemberStatus.NORMAL, MemberStatus.REQUESTED])
    @pytest.mark.parametrize(
        "target", [MemberStatus.EXPELLED, MemberStatus.BLOCKED, MemberStatus.LEFT]
    )
    def test_active_member_can_reach_terminal_states(self, source, target):
        assert membership_policy.check_transition(source, target) is True

    @pytest.mark.parametrize(
        "status",
        [MemberStatus.EXPELLED, MemberStatus.BLOCKED, MemberStatus.LEFT, MemberStatus.NORMAL],
    )
    def test_same_status_is_noop(self, status):
        assert membership_policy.check_transition(status, status) is False

    def test_terminal_states_do_not_move(self):
        with pytest.raises(InvalidStateError):
            membership_policy.check_transition(MemberStatus.EXPELLED, MemberStatus.BLOCKED)
        with pytest.raises(InvalidStateError):
            membership_policy.check_transition(MemberStatus.LEFT, MemberStatus.EXPELLED)

    def test_nothing_restores_normal(self):
        with pytest.raises(InvalidStateError):
            membership_policy.check_transition(MemberStatus.BLOCKED, MemberStatus.NORMAL)

    def test_requested_is_not_approved_by_a_status_change(self):
        with pytest.raises(InvalidStateError):
            membership_policy.check_transition(MemberStatus.REQUESTED, MemberStatus.NORMAL)


class TestMemberEntity:
    def test_expel_twice_reports_no_change(self):
        member = make_member()
        assert member.expel() is True
        assert member.expel() is False
        assert member.status is MemberStatus.EXPELLED

    def test_block_after_expel_raises(self):
        member = make_member()
        member.expel()
        with pytest.raises(InvalidStateError):
            member.block()


class TestAdmission:
    def test_active_member_cannot_enter_again(self):
        chat = make_chat(ChatType.PUBLIC_GROUP)
        with pytest.raises(InvalidStateError):
            membership_policy.ensure_can_enter(chat, OTHER, [make_member()])

    def test_blocked_user_is_denied(self):
        chat = make_chat(ChatType.PUBLIC_GROUP)
        blocked = make_member(status=MemberStatus.BLOCKED)
        with pytest.raises(AccessDeniedError):
            membership_policy.ensure_can_enter(chat, OTHER, [blocked])

    def test_user_who_left_may_enter(self):
        chat = make_chat(ChatType.PUBLIC_GROUP)
        membership_policy.ensure_can_enter(chat, OTHER, [make_member(status=MemberStatus.LEFT)])

    def test_only_active_owner_administers(self):
        chat = make_chat(ChatType.PUBLIC_GROUP)
        owner = make_member(user=OWNER, member_type=MemberType.OWNER)
        members = [owner, make_member()]
        assert membership_policy.ensure_can_administer(chat, OWNER, members) is owner
        with pytest.raises(AccessDeniedError):
            membership_policy.ensure_can_administer(chat, OTHER, members)

    def test_owner_who_left_cannot_administer(self):
        chat = make_chat(ChatType.PUBLIC_GROUP)
        owner = make_member(user=OWNER, member_type=MemberType.OWNER, status=MemberStatus.LEFT)
        with pytest.raises(AccessDeniedError):
            membership_policy.ensure_can_administer(chat, OWNER, [owner])

    def test_owner_cannot_be_sanctioned(self):
        owner = make_member(user=OWNER, member_type=MemberType.OWNER)
        with pytest.raises(AccessDeniedError):
            membership_policy.ensure_can_sanction(owner)
