"""Ping item - liveness check for the module."""
from ..item_decorator import Item
from ..request import ItemContext, ItemRequest
from ..results import ResultKind


@Item(
    "stress.ping",
    "Always returns 1. Parameters are ignored.",
    kind=ResultKind.UI64,
    test_params="anything",
)
def ping(request: ItemRequest, ctx: ItemContext) -> int:
    return 1
