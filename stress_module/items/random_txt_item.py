"""Random text item - long alphanumeric string stored as text."""
from ..item_decorator import Item
from ..request import ItemContext, ItemRequest
from ..results import ResultKind

RANDOM_TXT_LENGTH = 506


@Item(
    "stress.random.txt",
    f"Return {RANDOM_TXT_LENGTH} random characters from [0-9a-zA-Z] as text.",
    kind=ResultKind.TEXT,
    test_params="anything",
)
def random_txt(request: ItemRequest, ctx: ItemContext) -> str:
    return ctx.rng.random_string(RANDOM_TXT_LENGTH)
