"""WormChat - a minimal chat client for the Worm AI backend.

Combines NiceGUI for the chat interface, httpx for the backend call,
FastAPI as the host application, and Pydantic for data validation.

Components:
    - api: Host application and health endpoint
    - client: HTTP transport to the backend and its error taxonomy
    - chat: Conversation state for the chat view
    - session: Local login state persisted per browser
    - ui: Web interface for chat interactions
    - models: Request/response schemas
"""

__version__ = "0.1.0"
