"""Application boundary — error rendering and ASGI response sending."""
