"""Tree helpers, JSON response envelopes, controller auto-binding, a service registry and error helpers."""

__version__ = "3.2.4"