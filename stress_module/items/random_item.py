"""Random range item - uniform integer between two caller supplied bounds."""
from ..handler_wrappers import ItemValidationError
from ..item_decorator import Item
from ..request import ItemContext, ItemRequest, parse_int
from ..results import ResultKind


@Item(
    "stress.random",
    "Return an integer drawn uniformly from [from, to], both ends inclusive.",
    kind=ResultKind.UI64,
    test_params="1,1000",
)
def random_range(request: ItemRequest, ctx: ItemContext) -> int:
    """Draw from the inclusive range given by the two parameters.

    Parameters are parsed leniently: anything that does not start with a
    number counts as 0, so ("x", "5") behaves like (0, 5).

    Raises:
        ItemValidationError: On a parameter count other than two, or when
            from is greater than to
    """
    if request.nparam != 2:
        raise ItemValidationError(
            "Invalid number of parameters.",
            hint="stress.random takes two parameters: from,to",
            nparam=request.nparam,
        )

    low = parse_int(request.get_param(0))
    high = parse_int(request.get_param(1))

    if low > high:
        raise ItemValidationError(
            "Invalid range specified.",
            hint="from must not be greater than to",
            low=low,
            high=high,
        )

    return ctx.rng.uniform_int(low, high)
