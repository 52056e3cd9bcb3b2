from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Union


class CaseSensitivity(Enum):
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"


@dataclass(frozen=True)
class MatchResult:
    matched: bool
    params: Dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.matched

    def __iter__(self) -> Iterator[Union[bool, Dict[str, str]]]:
        yield self.matched
        yield self.params
