"""Kida environment setup and rendering helpers.

The environment is created once, when the app first needs it, from
the app's ``AppConfig``.
"""

from collections.abc import Mapping
from typing import Any

from kida import Environment, FileSystemLoader

from essentio.config import AppConfig


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment over ``config.template_dir``."""
    return Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )


def render(env: Environment, name: str, context: Mapping[str, Any] | None = None) -> str:
    """Render the template *name* to a string."""
    template = env.get_template(name)
    return template.render(dict(context or {}))


def render_string(
    source: str,
    context: Mapping[str, Any] | None = None,
    env: Environment | None = None,
) -> str:
    """Render an inline template source to a string."""
    template = (env or Environment()).from_string(source)
    return template.render(dict(context or {}))
