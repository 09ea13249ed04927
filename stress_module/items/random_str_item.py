"""Random string item - short alphanumeric string."""
from ..item_decorator import Item
from ..request import ItemContext, ItemRequest
from ..results import ResultKind

# Fits the host's short string storage (255 characters)
RANDOM_STR_LENGTH = 249


@Item(
    "stress.random.str",
    f"Return {RANDOM_STR_LENGTH} random characters from [0-9a-zA-Z].",
    kind=ResultKind.STR,
    test_params="anything",
)
def random_str(request: ItemRequest, ctx: ItemContext) -> str:
    return ctx.rng.random_string(RANDOM_STR_LENGTH)
