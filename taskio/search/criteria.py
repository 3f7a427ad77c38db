"""Search criteria and their normalization."""

from dataclasses import dataclass, fields
from datetime import date

from ..models import TaskStatus


@dataclass(frozen=True)
class FilterCriteria:
    """Normalized search/filter parameters for a single request.

    ``None`` means the criterion is absent and does not constrain results.
    """

    search_term: str | None = None
    status: TaskStatus | None = None
    start_date: date | None = None
    end_date: date | None = None
    category: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when every criterion is absent."""
        return all(getattr(self, f.name) is None for f in fields(self))


def normalize(
    search_term: str | None = None,
    status: TaskStatus | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    category: str | None = None,
) -> FilterCriteria:
    """Build criteria from raw request inputs.

    The search term is stripped and dropped when nothing is left. Every other
    input is kept as given, including an empty category string.
    """
    if search_term is not None:
        search_term = search_term.strip() or None
    return FilterCriteria(
        search_term=search_term,
        status=status,
        start_date=start_date,
        end_date=end_date,
        category=category,
    )
