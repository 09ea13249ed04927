"""Random double item - floating point value from the legacy formula."""
from ..item_decorator import Item
from ..request import ItemContext, ItemRequest
from ..results import ResultKind

RANDOM_DOUBLE_FROM = 1.0
RANDOM_DOUBLE_TO = 2000.0


@Item(
    "stress.random.double",
    "Return a floating point value derived from one raw draw.",
    kind=ResultKind.DBL,
    test_params="anything",
)
def random_double(request: ItemRequest, ctx: ItemContext) -> float:
    # Not bounded by RANDOM_DOUBLE_TO, see RandomGenerator.uniform_real
    return ctx.rng.uniform_real(RANDOM_DOUBLE_FROM, RANDOM_DOUBLE_TO)
