from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

DEFAULT_MAX_CHILDREN = 10
DEFAULT_MAX_TOKEN_LENGTH = 50
DEFAULT_MAX_DEPTH = 256

LIMIT_FIELDS = ("max_children", "max_token_length", "max_depth", "max_input_size")


@dataclass(frozen=True)
class Token:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class SList:
    children: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return f'({" ".join(str(c) for c in self.children)})'

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __getitem__(self, i: int) -> "Value":
        return self.children[i]


# A parsed node is exactly one of the two variants; the class is the tag.
Value = Union[SList, Token]


@dataclass
class Limits:
    max_children: Optional[int] = DEFAULT_MAX_CHILDREN
    max_token_length: Optional[int] = DEFAULT_MAX_TOKEN_LENGTH
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    max_input_size: Optional[int] = None

    def __post_init__(self):
        for name in LIMIT_FIELDS:
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.max_token_length == 0:
            raise ValueError("max_token_length must be at least 1")

    @classmethod
    def of(cls, limits: Any = None) -> "Limits":
        """Coerce None, a dict, or a Limits into a Limits."""
        if limits is None:
            return cls()
        if isinstance(limits, cls):
            return limits
        if isinstance(limits, dict):
            unknown = sorted(str(k) for k in set(limits) - set(LIMIT_FIELDS))
            if unknown:
                raise TypeError(f"unknown limits: {', '.join(unknown)}")
            return cls(**limits)
        raise TypeError(f"limits must be a Limits or dict, not {type(limits).__name__}")
