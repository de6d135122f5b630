"""Integration tests for components working together.

Coverage:
    - ChatTransport through a real httpx client against a respx-mocked backend
    - Host application routes through ASGITransport
"""
