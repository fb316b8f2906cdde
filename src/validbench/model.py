from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Final

from validbench.rules import UNSET_DATE


@dataclass(frozen=True, kw_only=True)
class Record:
    """
    The validated entity. Validators only read it.
    """

    count: int = 0
    date_of_birth: date | None = field(default=UNSET_DATE)
    name: str | None = None
    numbers: Sequence[int] | None = None


# Fixed benchmark inputs: a missing record, then records gaining one more populated field each.
M1: Final = None
M2: Final = Record(numbers=[])
M3: Final = Record(numbers=[], name="")
M4: Final = Record(numbers=[], name="", date_of_birth=date(2001, 1, 1))

FIXTURES: Final[tuple[Record | None, ...]] = (M1, M2, M3, M4)
