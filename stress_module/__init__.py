# Python version check - must be first, the package uses 3.10+ syntax
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        f"stress_module requires Python 3.10 or later, "
        f"running {sys.version_info.major}.{sys.version_info.minor}"
    )

# Stress item module - metric provider for monitoring agents.
#
# Answers a fixed set of "stress.*" item keys with constants, echoes, a
# sentinel file check and random values, for load testing the host's
# collection pipeline. The functions below are the entry points a host calls;
# they act on one process-wide StressModule created by init().

from typing import Optional, Sequence

from .config import Config, ConfigManager
from .item_decorator import RegistryEntry
from .module import MODULE_API_VERSION, StressModule
from .results import ResultBase

__version__ = "1.0.0"

# Global instance
_module: Optional[StressModule] = None


def api_version() -> int:
    """Version of the module interface this package implements."""
    return MODULE_API_VERSION


def init(config: Optional[Config] = None) -> StressModule:
    """Called on host startup - create and initialize the module.

    Without an explicit config, the file named by STRESS_MODULE_CONFIG is
    loaded (or defaults are used).
    """
    global _module
    if _module is not None and _module.is_running:
        raise RuntimeError("Stress module is already initialized")

    if config is None:
        config = ConfigManager().load()

    module = StressModule(config)
    module.init()
    _module = module
    return module


def shutdown() -> None:
    """Called on host shutdown."""
    global _module
    if _module:
        _module.shutdown()
        _module = None


def item_list() -> list[RegistryEntry]:
    return _require_module().item_list()


def item_timeout(timeout: int) -> None:
    """Set the per-item timeout in seconds, 0 - no timeout set."""
    _require_module().set_item_timeout(timeout)


def dispatch(key: str, params: Sequence[str] = ()) -> ResultBase:
    return _require_module().dispatch(key, params)


def _require_module() -> StressModule:
    if _module is None:
        raise RuntimeError("Stress module not initialized, call init() first")
    return _module


__all__ = [
    "Config",
    "ConfigManager",
    "RegistryEntry",
    "StressModule",
    "api_version",
    "dispatch",
    "init",
    "item_list",
    "item_timeout",
    "shutdown",
]
