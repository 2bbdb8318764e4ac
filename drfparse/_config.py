"""
Library configuration.

Settings are read from environment variables at import time and can be
overridden at runtime with configure(). Call reset_config() to drop runtime
overrides and fall back to the environment (or built-in) value again.

Environment variables:
    DRFPARSE_PERIODIC_IMMEDIATE: default of the periodic event "immediate"
        flag when a ``@P``/``@Q`` event omits the ``,TRUE``/``,FALSE`` suffix.
"""

import logging
import os
import threading
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_PERIODIC_IMMEDIATE = True

_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})


def _get_env_bool(name: str, default: Optional[bool] = None) -> Optional[bool]:
    """Get environment variable as bool."""
    val = os.environ.get(name)
    if val is None:
        return default
    lowered = val.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Environment variable {name} must be a boolean, got {val!r}")


_env_periodic_immediate = _get_env_bool("DRFPARSE_PERIODIC_IMMEDIATE")

_config_lock = threading.Lock()
_config_periodic_immediate: Optional[bool] = None


def configure(periodic_immediate: Optional[bool] = None) -> None:
    """Configure drfparse global settings.

    Args:
        periodic_immediate: Default for the periodic event immediate flag
            (default: from DRFPARSE_PERIODIC_IMMEDIATE or True)
    """
    global _config_periodic_immediate

    if periodic_immediate is not None and not isinstance(periodic_immediate, bool):
        raise ValueError(f"periodic_immediate must be a bool, got {periodic_immediate!r}")

    with _config_lock:
        if periodic_immediate is not None:
            _config_periodic_immediate = periodic_immediate
            logger.debug("Periodic immediate default set to %s", periodic_immediate)


def reset_config() -> None:
    """Drop runtime overrides made with configure()."""
    global _config_periodic_immediate

    with _config_lock:
        _config_periodic_immediate = None


def get_periodic_immediate_default() -> bool:
    """Effective default for the periodic event immediate flag."""
    with _config_lock:
        if _config_periodic_immediate is not None:
            return _config_periodic_immediate
    if _env_periodic_immediate is not None:
        return _env_periodic_immediate
    return DEFAULT_PERIODIC_IMMEDIATE
