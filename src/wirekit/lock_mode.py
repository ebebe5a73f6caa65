from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for singleton first resolution.

    Use these values for per-registration ``lock_mode`` or the container-level
    default. Registries themselves are never locked; hosts that mutate
    bindings from several threads must synchronize externally.
    """

    THREAD = "thread"
    """Guard the first singleton resolution with ``threading.RLock``."""

    NONE = "none"
    """Disable locking; concurrent first resolutions may invoke the producer twice."""
