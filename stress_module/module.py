"""Lifecycle of one loaded stress module.

This module provides the StressModule class, the single object a host talks
to. It owns the configuration, the shared RandomGenerator and the item
registry, and exposes the calls a loadable agent module answers: interface
version, init, item list, item timeout, query dispatch and shutdown.

Call Order:
    1. api_version() - host checks the interface version
    2. init() - seeds the random generator, exactly once
    3. item_list() - host learns the supported keys
    4. set_item_timeout() - optional, host's per-item time limit
    5. dispatch() - any number of queries, from any thread
    6. shutdown() - host unloads the module
"""

import logging
from typing import Optional, Sequence

from .config import Config
from .item_decorator import RegistryEntry
from .item_registry import ItemRegistry
from .random_generator import RandomGenerator
from .request import ItemContext
from .results import ResultBase

logger = logging.getLogger(__name__)

# The only version of the module interface
MODULE_API_VERSION = 1


class StressModule:
    """Host-facing facade over the item registry.

    Usage:
        >>> module = StressModule()
        >>> module.init()
        >>> module.dispatch("stress.echo", ["hello"])
        StrResult(kind='str', value='hello')
        >>> module.shutdown()

    Tests inject a deterministic generator:
        >>> module = StressModule(rng=RandomGenerator(random.Random(7)))

    Attributes:
        _config: Current configuration (sentinel path, log level)
        _rng: Random generator shared by all items of this module
        _registry: Immutable item table
        _item_timeout: Host's per-item timeout in seconds, 0 for none
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        registry: Optional[ItemRegistry] = None,
        rng: Optional[RandomGenerator] = None,
    ) -> None:
        self._config = config or Config()
        self._registry = registry if registry is not None else ItemRegistry.default()
        self._rng = rng or RandomGenerator()
        self._item_timeout = 0
        self._initialized = False

    @staticmethod
    def api_version() -> int:
        return MODULE_API_VERSION

    def init(self) -> None:
        """Validate config, apply the log level and seed the generator.

        Raises:
            RuntimeError: If init() was already called.
            ValueError: If the configuration is not valid.
        """
        if self._initialized:
            raise RuntimeError("Stress module is already initialized")

        valid, error = self._config.is_valid()
        if not valid:
            raise ValueError(f"Invalid configuration: {error}")

        logging.getLogger(__package__).setLevel(self._config.log_level.upper())

        if not self._rng.seeded:
            self._rng.seed()

        self._initialized = True
        logger.info("Stress module initialized with %d items", len(self._registry))

    def shutdown(self) -> None:
        """Release the module. Nothing needs cleanup; the generator is transient."""
        if self._initialized:
            logger.info("Stress module shut down")
        self._initialized = False

    @property
    def is_running(self) -> bool:
        return self._initialized

    @property
    def config(self) -> Config:
        return self._config

    @property
    def registry(self) -> ItemRegistry:
        return self._registry

    @property
    def item_timeout(self) -> int:
        return self._item_timeout

    def set_item_timeout(self, timeout: int) -> None:
        """Store the host's item timeout (seconds, 0 means none)."""
        if timeout < 0:
            raise ValueError(f"Timeout must not be negative, got {timeout}")
        self._item_timeout = timeout

    def update_config(self, config: Config) -> None:
        """Use `config` for all later queries.

        Suitable as a ConfigManager.on_change listener. The generator is not
        reseeded.
        """
        valid, error = config.is_valid()
        if not valid:
            raise ValueError(f"Invalid configuration: {error}")
        self._config = config
        if self._initialized:
            logging.getLogger(__package__).setLevel(config.log_level.upper())

    def item_list(self) -> list[RegistryEntry]:
        return self._registry.list_items()

    def dispatch(self, key: str, params: Sequence[str] = ()) -> ResultBase:
        """Answer one query. Failures come back as ErrorResult, never raised."""
        context = ItemContext(rng=self._rng, config=self._config)
        return self._registry.dispatch(key, params, context, timeout=self._item_timeout)

    def probe_items(self) -> dict[str, ResultBase]:
        """Query every item once with its documented test parameters.

        Test parameters are split on commas; an empty string means no
        parameters.
        """
        results: dict[str, ResultBase] = {}
        for entry in self.item_list():
            params = entry.test_params.split(",") if entry.test_params else []
            results[entry.key] = self.dispatch(entry.key, params)
        return results
