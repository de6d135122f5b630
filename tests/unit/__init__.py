"""Unit tests for individual components in isolation.

Coverage:
    - config: Settings validation and environment loading
    - models: Wire format serialization
    - session: Storage and the login state machine
    - chat: Conversation send flow and error banner
"""
