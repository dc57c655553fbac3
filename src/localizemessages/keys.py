"""Localize key construction.

A localize key names a message in the resource store. It is composed from up
to three parts, always in this order and joined by "_":

    {ClassName}_{MethodName}_{LocalKey}

Which parts are present is chosen by a KeyScope. Absent parts (None or
empty) are skipped; a key with no parts at all is a programming mistake and
raises LocalizeKeyError.

The class part is the simple class name when the caller states the name is
unique, otherwise a registered display name, otherwise the fully-qualified
name. Display names for classes and methods are held in an explicit
NameRegistry, populated at startup or by the localize_set_* decorators.

The calling method name and line number are explicit parameters: they are
used for the method part of the key and for diagnostics only.

Example:
    >>> class OrderService:
    ...     def place(self) -> LocalizeKeyData:
    ...         return class_method_localize_key("NoStock", self, "place")
    >>> OrderService().place().localize_key
    '__main__.OrderService_place_NoStock'

Python 3.13+.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from localizemessages.constants import LOCALIZE_KEY_SEPARATOR
from localizemessages.diagnostics.errors import LocalizeKeyError
from localizemessages.enums import KeyScope

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Key data
    "LocalizeKeyData",
    # Name overrides
    "NameRegistry",
    "default_registry",
    "localize_set_class_name",
    "localize_set_method_name",
    # Builders
    "build_localize_key",
    "class_localize_key",
    "class_method_localize_key",
    "method_localize_key",
    "just_this_localize_key",
    "already_localized",
]


@dataclass(frozen=True, slots=True)
class LocalizeKeyData:
    """Localize key plus where the message was created.

    Attributes:
        localize_key: Composed key, or None when the message is already
            localized and must not be looked up.
        calling_class: Class the message was created in (diagnostics only)
        method_name: Method the message was created in (diagnostics only)
        source_line_number: Line the message was created on (diagnostics only)
    """

    localize_key: str | None
    calling_class: type | None = None
    method_name: str = ""
    source_line_number: int = 0

    @property
    def is_already_localized(self) -> bool:
        """True when no resource lookup should be attempted."""
        return self.localize_key is None

    @property
    def calling_class_name(self) -> str:
        """Simple name of the calling class, or "" when unknown."""
        return self.calling_class.__name__ if self.calling_class is not None else ""

    @property
    def calling_location(self) -> str:
        """Human-readable caller location used in log messages."""
        return f"{self.calling_class_name}.{self.method_name}, line {self.source_line_number}"


class NameRegistry:
    """Display-name overrides for classes and methods used in localize keys.

    Fully-qualified class names make long keys; registering a short, unique
    display name keeps keys readable while staying unique.

    Thread-safe: registrations are expected at startup but may happen on any
    thread.

    Example:
        >>> registry = NameRegistry()
        >>> registry.register_class_name(OrderService, "Orders")
        >>> registry.class_name(OrderService)
        'Orders'
    """

    __slots__ = ("_class_names", "_lock", "_method_names")

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._class_names: dict[type, str] = {}
        self._method_names: dict[tuple[type, str], str] = {}
        self._lock = threading.Lock()

    def register_class_name(self, cls: type, display_name: str) -> None:
        """Register the display name used for cls in localize keys.

        Raises:
            ValueError: If display_name is empty or whitespace
        """
        if not display_name or not display_name.strip():
            msg = f"Display name for {cls.__qualname__} cannot be empty"
            raise ValueError(msg)
        with self._lock:
            self._class_names[cls] = display_name

    def register_method_name(self, cls: type, method_name: str, display_name: str) -> None:
        """Register the display name used for cls.method_name in localize keys.

        Raises:
            ValueError: If display_name is empty or whitespace
        """
        if not display_name or not display_name.strip():
            msg = f"Display name for {cls.__qualname__}.{method_name} cannot be empty"
            raise ValueError(msg)
        with self._lock:
            self._method_names[(cls, method_name)] = display_name

    def class_name(self, cls: type) -> str | None:
        """Return the registered display name for cls, or None."""
        return self._class_names.get(cls)

    def method_name(self, cls: type, method_name: str) -> str | None:
        """Return the registered display name for cls.method_name, or None."""
        return self._method_names.get((cls, method_name))

    def clear(self) -> None:
        """Remove all registrations."""
        with self._lock:
            self._class_names.clear()
            self._method_names.clear()


default_registry = NameRegistry()
"""Registry used by the key builders when none is passed explicitly."""


C = TypeVar("C", bound=type)


def localize_set_class_name(
    display_name: str, *, registry: NameRegistry | None = None
) -> Callable[[C], C]:
    """Class decorator registering a display name for localize keys.

    Example:
        >>> @localize_set_class_name("Orders")
        ... class OrderService: ...
        >>> class_localize_key("NoStock", OrderService, name_is_unique=False).localize_key
        'Orders_NoStock'
    """
    target = registry if registry is not None else default_registry

    def decorator(cls: C) -> C:
        target.register_class_name(cls, display_name)
        return cls

    return decorator


class _MethodNameOverride:
    """Descriptor that registers a method display name when its class is created."""

    def __init__(self, func: Callable[..., Any], display_name: str, registry: NameRegistry) -> None:
        self._func = func
        self._display_name = display_name
        self._registry = registry

    def __set_name__(self, owner: type, name: str) -> None:
        self._registry.register_method_name(owner, name, self._display_name)
        # Replace the descriptor with the plain function once registered
        setattr(owner, name, self._func)


def localize_set_method_name(
    display_name: str, *, registry: NameRegistry | None = None
) -> Callable[[Callable[..., Any]], Any]:
    """Method decorator registering a display name for localize keys.

    The method is left unchanged; the registration happens when the owning
    class body is executed.

    Example:
        >>> class OrderService:
        ...     @localize_set_method_name("Place")
        ...     def place_order_with_checks(self) -> str:
        ...         key = method_localize_key("NoStock", self, "place_order_with_checks")
        ...         return key.localize_key
        >>> OrderService().place_order_with_checks()
        'Place_NoStock'
    """
    target = registry if registry is not None else default_registry

    def decorator(func: Callable[..., Any]) -> Any:
        return _MethodNameOverride(func, display_name, target)

    return decorator


def _as_type(calling_class: object) -> type:
    """Accept a class or an instance; instances use their type."""
    return calling_class if isinstance(calling_class, type) else type(calling_class)


def _class_part(cls: type, *, name_is_unique: bool, registry: NameRegistry) -> str:
    if name_is_unique:
        return cls.__name__
    return registry.class_name(cls) or f"{cls.__module__}.{cls.__qualname__}"


def build_localize_key(
    local_key: str | None,
    calling_class: object,
    method_name: str = "",
    *,
    scope: KeyScope,
    name_is_unique: bool = False,
    source_line_number: int = 0,
    registry: NameRegistry | None = None,
) -> LocalizeKeyData:
    """Compose a localize key from the caller's class, method and a local key.

    Args:
        local_key: Local part of the key; None marks the message as already
            localized (no resource lookup, no key composition).
        calling_class: Class or instance the message is created in
        method_name: Name of the calling method
        scope: Which of class/method parts are prepended
        name_is_unique: Use the simple class name instead of the registered
            display name or the fully-qualified name
        source_line_number: Caller line number, for diagnostics
        registry: Name overrides; defaults to default_registry

    Returns:
        LocalizeKeyData with the composed key

    Raises:
        LocalizeKeyError: If no part is present after applying the scope
    """
    cls = _as_type(calling_class)
    if local_key is None:
        return LocalizeKeyData(None, cls, method_name, source_line_number)

    names = registry if registry is not None else default_registry
    parts: list[str | None] = []
    if scope in (KeyScope.CLASS_ONLY, KeyScope.CLASS_AND_METHOD):
        parts.append(_class_part(cls, name_is_unique=name_is_unique, registry=names))
    if scope in (KeyScope.METHOD_ONLY, KeyScope.CLASS_AND_METHOD):
        parts.append(names.method_name(cls, method_name) or method_name)
    parts.append(local_key)

    present = [part for part in parts if part]
    if not present:
        msg = (
            f"Localize key for {cls.__qualname__}.{method_name} (scope={scope}) "
            "has no class, method or local key part"
        )
        raise LocalizeKeyError(msg)

    return LocalizeKeyData(
        LOCALIZE_KEY_SEPARATOR.join(present), cls, method_name, source_line_number
    )


def class_localize_key(
    local_key: str,
    calling_class: object,
    name_is_unique: bool,
    method_name: str = "",
    *,
    source_line_number: int = 0,
    registry: NameRegistry | None = None,
) -> LocalizeKeyData:
    """Build a {ClassName}_{LocalKey} key.

    Useful when a class has several messages with the same format.
    """
    return build_localize_key(
        local_key,
        calling_class,
        method_name,
        scope=KeyScope.CLASS_ONLY,
        name_is_unique=name_is_unique,
        source_line_number=source_line_number,
        registry=registry,
    )


def class_method_localize_key(
    local_key: str,
    calling_class: object,
    method_name: str,
    *,
    source_line_number: int = 0,
    registry: NameRegistry | None = None,
) -> LocalizeKeyData:
    """Build a {ClassName}_{MethodName}_{LocalKey} key.

    The class part is the registered display name or the fully-qualified
    name, so keys stay unique when one resource serves many classes.
    """
    return build_localize_key(
        local_key,
        calling_class,
        method_name,
        scope=KeyScope.CLASS_AND_METHOD,
        source_line_number=source_line_number,
        registry=registry,
    )


def method_localize_key(
    local_key: str,
    calling_class: object,
    method_name: str,
    *,
    source_line_number: int = 0,
    registry: NameRegistry | None = None,
) -> LocalizeKeyData:
    """Build a {MethodName}_{LocalKey} key."""
    return build_localize_key(
        local_key,
        calling_class,
        method_name,
        scope=KeyScope.METHOD_ONLY,
        source_line_number=source_line_number,
        registry=registry,
    )


def just_this_localize_key(
    local_key: str,
    calling_class: object,
    method_name: str = "",
    *,
    source_line_number: int = 0,
) -> LocalizeKeyData:
    """Use local_key unchanged as the localize key."""
    return build_localize_key(
        local_key,
        calling_class,
        method_name,
        scope=KeyScope.JUST_KEY,
        source_line_number=source_line_number,
    )


def already_localized(
    calling_class: object, method_name: str = "", *, source_line_number: int = 0
) -> LocalizeKeyData:
    """Mark a message as already localized, so no resource lookup is made."""
    return build_localize_key(
        None,
        calling_class,
        method_name,
        scope=KeyScope.JUST_KEY,
        source_line_number=source_line_number,
    )
