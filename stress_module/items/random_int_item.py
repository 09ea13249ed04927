"""Random int item - uniform integer from a fixed range."""
from ..item_decorator import Item
from ..request import ItemContext, ItemRequest
from ..results import ResultKind

RANDOM_INT_FROM = 0
RANDOM_INT_TO = 2000


@Item(
    "stress.random.int",
    f"Return an integer drawn uniformly from [{RANDOM_INT_FROM}, {RANDOM_INT_TO}].",
    kind=ResultKind.UI64,
    test_params="anything",
)
def random_int(request: ItemRequest, ctx: ItemContext) -> int:
    return ctx.rng.uniform_int(RANDOM_INT_FROM, RANDOM_INT_TO)
