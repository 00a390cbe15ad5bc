"""Templates rendered with kida."""

from essentio.templating.integration import create_environment, render, render_string

__all__ = ["create_environment", "render", "render_string"]
