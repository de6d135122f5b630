"""Test package for WormChat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Transport against a mocked backend, host routes over ASGI

Uses respx to stand in for the backend at the httpx layer; no real HTTP.
Leverages pytest with pytest-check for soft assertions.
"""
