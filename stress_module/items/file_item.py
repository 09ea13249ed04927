"""File item - reports whether the sentinel file exists."""
import logging
import os

from ..item_decorator import Item
from ..request import ItemContext, ItemRequest
from ..results import ResultKind

logger = logging.getLogger(__name__)


@Item(
    "stress.file",
    "Return 1 if the configured sentinel file exists, otherwise 0.",
    kind=ResultKind.UI64,
    test_params="anything",
)
def file_exists(request: ItemRequest, ctx: ItemContext) -> int:
    """Check the sentinel path with stat().

    Any failure of the check (missing file, permission denied, bad path)
    counts as "does not exist"; this item never reports an error.
    """
    path = ctx.config.sentinel_path
    try:
        os.stat(path)
    except (OSError, ValueError) as e:
        logger.debug("Sentinel %s treated as absent: %s", path, e)
        return 0
    return 1
