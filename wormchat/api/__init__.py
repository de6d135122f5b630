"""FastAPI host application.

Serves the NiceGUI chat interface and a health endpoint.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat interface (mounted by NiceGUI)
"""

from wormchat.api.app import app, create_app

__all__ = ["app", "create_app"]
