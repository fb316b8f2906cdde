from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from validbench.model import FIXTURES, Record

if TYPE_CHECKING:
    from validbench.types import Validator

logger = logging.getLogger(__name__)


def run_validator(
    validate: Validator,
    fixtures: Iterable[Record | None] = FIXTURES,
    *,
    current_year: int | None = None,
) -> list[list[str]]:
    """
    Run ``validate`` over every fixture, returning one failure list per fixture in input order.
    """
    results = [validate(record, current_year=current_year) for record in fixtures]
    logger.debug("Ran %s over %d fixtures", getattr(validate, "__module__", validate), len(results))
    return results
