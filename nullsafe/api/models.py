from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

# NaN and Infinity are rejected: NaN != NaN and neither survives a JSON response.
FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]

# JSON scalars only; nested arrays/objects are unhashable and rejected.
Scalar = Union[StrictBool, StrictInt, FiniteFloat, StrictStr]


class EqualRequest(BaseModel):
    """Two possibly-absent operands; a missing field means None."""
    a: Optional[Scalar] = None
    b: Optional[Scalar] = None


class EqualResponse(BaseModel):
    equal: bool


class HashRequest(BaseModel):
    """Ordered values to combine into a single hash."""
    values: list[Optional[Scalar]] = Field(default_factory=list)


class HashResponse(BaseModel):
    """Combined hash; only stable within one server process."""
    hash: int
    count: int


class FirstNonNullRequest(BaseModel):
    first: Optional[Scalar] = None
    second: Optional[Scalar] = None


class FirstNonNullResponse(BaseModel):
    value: Scalar
