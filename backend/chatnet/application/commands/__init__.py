"""
Transaction commands, one per ledger operation.

- chats/       → StartNewPeerChat, StartNewGroupChat
- membership/  → JoinToChat, AddOtherUserToChat, ExpelMemberFromChat,
                 BlockMember, LeaveChat
- messages/    → SendMessageToChat, DeleteMessage
"""
