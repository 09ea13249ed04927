"""Echo item - returns its only parameter unchanged."""
from ..handler_wrappers import ItemValidationError
from ..item_decorator import Item
from ..request import ItemContext, ItemRequest
from ..results import ResultKind


@Item(
    "stress.echo",
    "Return the single parameter verbatim as a short string.",
    kind=ResultKind.STR,
    test_params="a message",
)
def echo(request: ItemRequest, ctx: ItemContext) -> str:
    """Echo the parameter back with no trimming or escaping.

    Raises:
        ItemValidationError: Unless exactly one parameter was given
    """
    if request.nparam != 1:
        raise ItemValidationError(
            "Invalid number of parameters.",
            hint="stress.echo takes exactly one parameter",
            nparam=request.nparam,
        )
    return request.get_param(0)
