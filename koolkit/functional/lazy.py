"""
Lazy Attribute Module
Installs attributes whose value is computed on first access.
"""

from typing import Any, Callable


class _LazyAttribute:
    """
    Non-data descriptor that runs its initializer once.

    After the first access the computed value is stored in the instance
    __dict__, which from then on shadows the descriptor. The attribute is
    therefore a plain writable attribute once initialized.
    """

    def __init__(self, name: str, initializer: Callable[[Any], Any]):
        self.name = name
        self.initializer = initializer

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        value = self.initializer(instance)
        instance.__dict__[self.name] = value
        return value


def lazy_get(host_obj: Any, name: str, initializer: Callable[[Any], Any]) -> None:
    """
    Lazily initialize an attribute of an object until it is used.

    The host's class is swapped for a one-off subclass carrying the lazy
    attribute, so other instances of the same class are unaffected.

    Args:
        host_obj: Instance or module to add the attribute to. Must have a
            __dict__ and allow __class__ assignment.
        name: Attribute name
        initializer: Called with host_obj on first access; its return value
            becomes the attribute value

    Example:
        >>> lazy_get(config, "settings", lambda host: load_settings())
        >>> config.settings  # load_settings() runs here, once
    """
    host_obj.__dict__.pop(name, None)

    host_cls = type(host_obj)
    lazy_cls = type(host_cls.__name__, (host_cls,), {
        name: _LazyAttribute(name, initializer),
        '__module__': host_cls.__module__,
        '__qualname__': host_cls.__qualname__,
    })
    host_obj.__class__ = lazy_cls
