"""Optional human-attribute-name capability.

Model objects may know a nicer name for an attribute than the humanized
identifier (``human_attribute_name`` on the object or its class). The
resolver only talks to the :class:`HumanNameProvider` protocol, so objects
without that hook get the no-op provider.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class HumanNameProvider(Protocol):
    def has_human_name(self, attribute: str) -> bool: ...

    def human_name(self, attribute: str) -> str: ...


class NullHumanNameProvider:
    """Provider for types with no human-name support."""

    def has_human_name(self, attribute: str) -> bool:
        return False

    def human_name(self, attribute: str) -> str:
        return ""


class CallableHumanNameProvider:
    """Wrap a ``human_attribute_name(attribute) -> str`` callable."""

    def __init__(self, func: Callable[[str], Optional[str]]) -> None:
        self._func = func

    def has_human_name(self, attribute: str) -> bool:
        return True

    def human_name(self, attribute: str) -> str:
        return str(self._func(attribute) or "")


class MappingHumanNameProvider:
    """Human names from a plain ``{attribute: name}`` mapping."""

    def __init__(self, names: Mapping[str, str]) -> None:
        self._names = dict(names)

    def has_human_name(self, attribute: str) -> bool:
        return bool(self._names.get(attribute))

    def human_name(self, attribute: str) -> str:
        return self._names.get(attribute, "")


def human_name_provider_for(obj: object) -> HumanNameProvider:
    """Probe *obj* (or its class) for ``human_attribute_name``."""
    if obj is None:
        return NullHumanNameProvider()
    if isinstance(obj, HumanNameProvider):
        return obj
    func = getattr(obj, "human_attribute_name", None)
    if func is None:
        func = getattr(type(obj), "human_attribute_name", None)
    if callable(func):
        return CallableHumanNameProvider(func)
    return NullHumanNameProvider()
