"""Switch import resolution — resolves ``"module:attribute"`` strings to Switch instances.

Shared by ``pathswitch routes`` and ``pathswitch match``.
"""

import importlib

from pathswitch.routing.switch import Switch


def resolve_switch(import_string: str) -> Switch:
    """Resolve an import string to a Switch instance.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"switch"`` (e.g. ``"myapp.routes"`` resolves to
    ``myapp.routes.switch``).

    Supports factory functions: if the resolved object is callable and not
    a Switch, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Switch or a factory for one.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "switch"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Switch):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Switch):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a pathswitch.Switch"
        raise TypeError(msg)

    return obj
