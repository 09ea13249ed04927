"""Pydantic models for item results.

Each query produces exactly one of these. The `kind` field is the
discriminator, so a serialized result can be parsed back with parse_result():

    >>> UnsignedResult(value=1).model_dump()
    {'kind': 'ui64', 'value': 1}
    >>> parse_result({"kind": "error", "message": "Invalid range specified."})
    ErrorResult(kind='error', message='Invalid range specified.', hint=None)

"str" and "text" differ only in the storage class the host files them under:
short strings are bounded near MAX_STR_LENGTH characters, text by a larger,
host-defined limit. Neither bound is enforced here.
"""
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

MAX_STR_LENGTH = 255


class ResultKind(str, Enum):
    UI64 = "ui64"
    DBL = "dbl"
    STR = "str"
    TEXT = "text"
    ERROR = "error"


class ResultBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return True


class UnsignedResult(ResultBase):
    """Integer value filed under the host's unsigned kind.

    Not range checked: stress.random over a negative range (e.g. -10,-3)
    returns the signed draw as is rather than a wrapped 64-bit value, so the
    value always lies between the requested bounds.
    """
    kind: Literal["ui64"] = "ui64"
    value: int


class FloatResult(ResultBase):
    """Floating point value."""
    kind: Literal["dbl"] = "dbl"
    value: float


class StrResult(ResultBase):
    """Short text value."""
    kind: Literal["str"] = "str"
    value: str


class TextResult(ResultBase):
    """Long text value."""
    kind: Literal["text"] = "text"
    value: str


class ErrorResult(ResultBase):
    """Failed query with a human readable message."""
    kind: Literal["error"] = "error"
    message: str = Field(description="What went wrong")
    hint: Optional[str] = Field(default=None, description="How to fix the query")

    @property
    def ok(self) -> bool:
        return False


ItemResult = Annotated[
    Union[UnsignedResult, FloatResult, StrResult, TextResult, ErrorResult],
    Field(discriminator="kind"),
]

_result_adapter: TypeAdapter[Any] = TypeAdapter(ItemResult)


def parse_result(data: dict[str, Any]) -> ResultBase:
    """Validate a serialized result back into its model."""
    return _result_adapter.validate_python(data)


def make_result(kind: ResultKind, value: Any) -> ResultBase:
    """Wrap a plain handler return value in the model for `kind`."""
    match kind:
        case ResultKind.UI64:
            return UnsignedResult(value=int(value))
        case ResultKind.DBL:
            return FloatResult(value=float(value))
        case ResultKind.STR:
            return StrResult(value=str(value))
        case ResultKind.TEXT:
            return TextResult(value=str(value))
        case ResultKind.ERROR:
            return ErrorResult(message=str(value))
    raise ValueError(f"Unknown result kind: {kind}")
