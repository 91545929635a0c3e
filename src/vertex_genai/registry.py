"""Process-local registry of client facades keyed by app name and location.

The registry is owned by whoever creates clients and passed in explicitly,
so tests can use a fresh instance per run. Entries are never evicted.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import threading

from vertex_genai.core.types import Failure, Result, Success
from vertex_genai.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


def instance_key(app_name: str, location: str) -> str:
    """Registry key for an app and region, in the form ``app_name:location``."""
    return f"{app_name}:{location}"


class InstanceRegistry[T]:
    """Maps instance keys to exactly one constructed client per key.

    Lookup, construction and insertion run under a single lock, so concurrent
    callers asking for the same key all receive the first caller's instance.
    """

    def __init__(self) -> None:
        """Initialize an empty mapping and its lock."""
        self._instances: dict[str, T] = {}
        self._lock = threading.Lock()

    def get_or_create(
        self, key: str, factory: Callable[[], T]
    ) -> Result[T, InvalidConfigurationError]:
        """Return the instance for ``key``, constructing it on first use.

        Args:
            key: Identity of the instance, usually from ``instance_key``.
            factory: Zero-argument constructor; only called on a miss.

        Returns:
            ``Success`` with the shared instance, or ``Failure`` when the
            factory rejected its configuration. Failed constructions are not
            stored.
        """
        with self._lock:
            existing = self._instances.get(key)
            if existing is not None:
                return Success(existing)
            try:
                instance = factory()
            except InvalidConfigurationError as e:
                logger.warning("Could not create instance for %r: %s", key, e)
                return Failure(e)
            self._instances[key] = instance
            logger.debug("Created instance for %r", key)
            return Success(instance)

    def get(self, key: str) -> T | None:
        """Return the instance for ``key``, if present."""
        with self._lock:
            return self._instances.get(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
