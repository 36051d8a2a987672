"""A registry that maps service names to their registered implementations."""

from __future__ import annotations

from typing import Any

SERVICE_NAMES = (
    "Context",
    "Middleware",
    "Personal",
    "SysAuthRule",
    "SysDept",
    "SysLoginLog",
    "OperateLog",
    "SysPost",
    "SysRole",
    "SysUser",
    "SysUserOnline",
    "TaskList",
    "GfToken",
)


class ServiceNotRegistered(LookupError):
    """Raised when a service is requested before an implementation is registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"implement not found for interface I{name}, forgot register?")
        self.name = name


class ServiceRegistry:
    """Holds one implementation per service name."""

    def __init__(self) -> None:
        self._impls: dict[str, Any] = {}

    def register(self, name: str, impl: Any) -> None:
        """Set the implementation of a service; None clears it."""
        self._impls[name] = impl

    def get(self, name: str) -> Any:
        """Return the implementation of a service.

        Raises ServiceNotRegistered if none has been registered.
        """
        impl = self._impls.get(name)
        if impl is None:
            raise ServiceNotRegistered(name)
        return impl

    def is_registered(self, name: str) -> bool:
        """Tell whether a service has an implementation."""
        return self._impls.get(name) is not None


services = ServiceRegistry()