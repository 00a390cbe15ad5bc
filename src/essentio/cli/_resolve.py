"""App import resolution — resolves ``"module:attribute"`` strings to App instances.

Shared by ``essentio routes`` and ``essentio call``.
"""

import importlib

from essentio.app import App


def resolve_app(import_string: str) -> App:
    """Resolve an import string to an essentio App instance.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``). If the resolved object is a callable other than an
    App, it is called as an app factory.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an ``App`` or a factory
            returning one.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not an essentio.App instance"
        raise TypeError(msg)

    return obj
