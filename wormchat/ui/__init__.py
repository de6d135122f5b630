"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Email login screen
    - Chat message display with markdown replies
    - Typing indicator and error banner
    - New conversation and logout actions

Contains minimal business logic. Delegates state to wormchat.session and
wormchat.chat, and the backend call to wormchat.client.
"""
