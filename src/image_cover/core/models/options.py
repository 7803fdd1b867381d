"""Literal-or-derived configuration values.

`path` and `file_name_generator` are either a fixed string or a callback
receiving ``(submission, record)``. Both forms are wrapped into a tagged union
so resolution code never has to guess which one it holds.
"""

from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, StrictStr

OptionCallback = Callable[[Any, Any], Any]


class LiteralOption(BaseModel):
    """A fixed value used verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    value: StrictStr


class DerivedOption(BaseModel):
    """A value computed from the submission and the owning record."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["derived"] = "derived"
    func: OptionCallback

    @property
    def name(self) -> str:
        return getattr(self.func, "__qualname__", repr(self.func))


ConfigOption = LiteralOption | DerivedOption


def as_option(value: Any) -> LiteralOption | DerivedOption:
    """Wrap a raw string or callable into its option variant.

    Raises:
        TypeError: If the value is neither a string nor callable
    """
    if isinstance(value, (LiteralOption, DerivedOption)):
        return value

    if isinstance(value, str):
        return LiteralOption(value=value)

    if callable(value):
        return DerivedOption(func=value)

    raise TypeError(f"Expected a string or a callable, got {type(value).__name__}")


def is_derived(option: LiteralOption | DerivedOption) -> bool:
    return isinstance(option, DerivedOption)
