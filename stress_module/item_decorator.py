from dataclasses import dataclass, field
from typing import Any, Callable, Optional
import logging

from .handler_wrappers import _auto_response, _error_handler
from .request import ItemContext, ItemRequest
from .results import ResultBase, ResultKind

logger = logging.getLogger(__name__)

ItemHandler = Callable[[ItemRequest, ItemContext], ResultBase]

# Global table storing all items registered via @Item decorator
# Key: item key, Value: RegistryEntry with the wrapped handler
_registry: dict[str, "RegistryEntry"] = {}


@dataclass(frozen=True)
class RegistryEntry:
    """One row of the item table.

    Attributes:
        key: Item key callers query (e.g., "stress.random").
        requires_params: Whether the key is advertised as taking parameters.
            Descriptive only; handlers check their own parameter counts.
        handler: Wrapped handler, always returns a result model.
        test_params: Example parameters for the host's item test mode.
            Comma separated, never validated.
        description: Human readable summary.
    """

    key: str
    requires_params: bool
    handler: ItemHandler = field(repr=False, compare=False)
    test_params: str = ""
    description: str = ""

    def describe(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "requires_params": self.requires_params,
            "test_params": self.test_params,
            "description": self.description,
        }


# ------------------------------------------------------------------------------
# Item - Decorator class that registers functions as item handlers
# ------------------------------------------------------------------------------
# Usage:
#   @Item("stress.echo", "Echo the single parameter back", kind=ResultKind.STR,
#         test_params="a message")
#   def echo(request: ItemRequest, ctx: ItemContext) -> str:
#       ...
#
# Parameters:
#   - key: Unique item key exposed to the host
#   - description: Shown in the capability listing
#   - kind: Result kind plain return values are wrapped in
#   - requires_params: Advertised parameter flag (default True)
#   - test_params: Example parameters for the host's test mode
#
# What happens at import time:
#   1. Wraps function with _auto_response (plain value -> typed result)
#   2. Wraps with _error_handler (exceptions -> ErrorResult)
#   3. Stores a RegistryEntry in _registry for ItemRegistry to pick up
# ------------------------------------------------------------------------------
class Item:
    def __init__(
        self,
        key: str,
        description: str,
        handler: Optional[Callable[..., Any]] = None,
        *,
        kind: ResultKind,
        requires_params: bool = True,
        test_params: str = "",
    ):
        self.key = key
        self.description = description
        self.kind = kind
        self.requires_params = requires_params
        self.test_params = test_params

        # Support both @Item(...) decorator and Item(..., handler=fn) direct call
        if handler is not None:
            self._register(handler)

    # Called when used as @Item(...) decorator
    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        self._register(func)
        return func  # Return original so it can be called directly for testing

    def _register(self, func: Callable[..., Any]) -> None:
        if self.key in _registry:
            raise ValueError(f"Item already registered: {self.key}")

        # Execution order: _error_handler -> _auto_response -> func
        wrapped = _auto_response(func, self.kind)
        wrapped = _error_handler(wrapped)

        _registry[self.key] = RegistryEntry(
            key=self.key,
            requires_params=self.requires_params,
            handler=wrapped,
            test_params=self.test_params,
            description=self.description,
        )
        logger.debug("Registered item %s", self.key)


def registered_entries() -> list[RegistryEntry]:
    """Entries registered through @Item so far, in registration order."""
    return list(_registry.values())
