"""
Parse results for sparse counter store keys.

A raw `(key, value)` pair classifies into exactly one of three variants,
discriminated by `kind`:

- ParsedKey: a daily snapshot, `<metric>_<seriesKey>_<13 digit millis>`
- ScalarKey: the series' static value, `<metric>_<seriesKey>`
- MalformedKey: anything else, with a reason
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class RawEntry(BaseModel):
    """One key/value pair as returned by the store."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Full store key")
    value: str = Field(description="Raw string value")


class ParsedKey(BaseModel):
    """
    A daily snapshot entry.

    Attributes:
        day: Epoch milliseconds taken from the 13 digit key suffix
        value: Numeric value of the entry
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["parsed"] = "parsed"
    day: int = Field(description="Epoch milliseconds of the snapshot day")
    value: Number = Field(description="Counter value for the day")


class ScalarKey(BaseModel):
    """The non-timestamped value of a series, kept as raw text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    value: str = Field(description="Raw scalar value (number or free text)")


class MalformedKey(BaseModel):
    """An entry that is neither a daily snapshot nor the scalar of the series."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["malformed"] = "malformed"
    reason: str = Field(description="Why the entry was rejected")
    bad_value: bool = Field(
        default=False,
        description="True when the key shape was valid but the value was not numeric",
    )


KeyParseResult = Annotated[
    Union[ParsedKey, ScalarKey, MalformedKey],
    Field(discriminator="kind"),
]
