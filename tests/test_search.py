# tests/test_search.py

from datetime import date
from itertools import combinations

import pytest

from taskio.models import Task, TaskStatus
from taskio.search import FilterCriteria, normalize, resolve

from .samples import make_tasks


@pytest.fixture()
def tasks() -> list[Task]:
    return [task.model_copy(update={"id": str(i)}) for i, task in enumerate(make_tasks(), 1)]


def ids(tasks: list[Task]) -> list[str]:
    return [task.id for task in tasks]


# ---- normalize ----


def test_normalize_strips_search_term() -> None:
    assert normalize("  report \t").search_term == "report"


@pytest.mark.parametrize("raw", [None, "", "   ", "\n\t"])
def test_normalize_blank_search_term_is_absent(raw) -> None:
    criteria = normalize(raw)
    assert criteria.search_term is None
    assert criteria.is_empty


def test_normalize_passes_other_fields_through() -> None:
    criteria = normalize(
        None, TaskStatus.DONE, date(2026, 1, 1), date(2026, 1, 31), " Work "
    )
    assert criteria == FilterCriteria(
        status=TaskStatus.DONE,
        start_date=date(2026, 1, 1),
        end_date=date(2026, 1, 31),
        category=" Work ",
    )


def test_normalize_keeps_empty_category_as_present() -> None:
    criteria = normalize(category="")
    assert criteria.category == ""
    assert not criteria.is_empty


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"search_term": "  Rep  "},
        {"search_term": "   ", "status": TaskStatus.TODO},
        {"start_date": date(2026, 1, 1), "category": ""},
    ],
)
def test_normalize_is_idempotent(raw) -> None:
    once = normalize(**raw)
    twice = normalize(
        once.search_term, once.status, once.start_date, once.end_date, once.category
    )
    assert twice == once


# ---- resolve ----


def test_empty_criteria_returns_everything_in_order(tasks) -> None:
    result = resolve(FilterCriteria(), tasks)
    assert result == tasks
    assert resolve(FilterCriteria(), list(reversed(tasks))) == list(reversed(tasks))


def test_empty_criteria_on_empty_collection() -> None:
    assert resolve(FilterCriteria(), []) == []


def test_scenario_empty_filters_and_status_filter() -> None:
    todo = Task(id="1", title="a", status=TaskStatus.TODO)
    done = Task(id="2", title="b", status=TaskStatus.DONE)

    assert ids(resolve(normalize(), [todo, done])) == ["1", "2"]
    assert ids(resolve(normalize(status=TaskStatus.TODO), [todo, done])) == ["1"]


@pytest.mark.parametrize("term", ["report", "REPORT", "Rep", "write report"])
def test_text_match_is_case_insensitive(term) -> None:
    task = Task(id="1", title="Write Report")
    assert resolve(normalize(term), [task]) == [task]


def test_text_match_checks_title_or_description(tasks) -> None:
    # "Plan trip" only mentions it in the description
    assert ids(resolve(normalize("report"), tasks)) == ["1", "3"]
    assert ids(resolve(normalize("groceries"), tasks)) == ["2"]
    assert ids(resolve(normalize("FICTION"), tasks)) == ["5"]
    assert resolve(normalize("nowhere"), tasks) == []


def test_text_match_handles_non_ascii_case(tasks) -> None:
    assert ids(resolve(normalize("ärger"), tasks)) == ["5"]


def test_status_filter(tasks) -> None:
    assert ids(resolve(normalize(status=TaskStatus.TODO), tasks)) == ["1", "4"]
    assert ids(resolve(normalize(status=TaskStatus.IN_PROGRESS), tasks)) == ["3"]


def test_date_range_is_inclusive(tasks) -> None:
    criteria = normalize(start_date=date(2026, 1, 5), end_date=date(2026, 1, 20))
    assert ids(resolve(criteria, tasks)) == ["1", "4"]


def test_open_ended_date_ranges(tasks) -> None:
    assert ids(resolve(normalize(start_date=date(2026, 2, 1)), tasks)) == ["3", "5"]
    assert ids(resolve(normalize(end_date=date(2026, 1, 19)), tasks)) == ["4"]


def test_task_without_due_date_never_matches_a_date_bound(tasks) -> None:
    # task 2 matches the text and category but has no due date
    for criteria in (
        normalize("groceries", start_date=date(2000, 1, 1)),
        normalize(category="Personal", end_date=date(2100, 1, 1)),
    ):
        assert "2" not in ids(resolve(criteria, tasks))


def test_category_match_is_exact_and_case_sensitive(tasks) -> None:
    assert ids(resolve(normalize(category="Work"), tasks)) == ["1", "4"]
    assert ids(resolve(normalize(category="personal"), tasks)) == ["5"]
    assert resolve(normalize(category="work"), tasks) == []
    assert resolve(normalize(category=""), tasks) == []


def test_criteria_are_combined_with_and(tasks) -> None:
    criteria = normalize(
        "report",
        TaskStatus.TODO,
        date(2026, 1, 1),
        date(2026, 1, 31),
        "Work",
    )
    assert ids(resolve(criteria, tasks)) == ["1"]
    assert resolve(normalize("report", status=TaskStatus.DONE), tasks) == []


def test_adding_a_criterion_never_widens_the_result(tasks) -> None:
    values = {
        "search_term": "r",
        "status": TaskStatus.TODO,
        "start_date": date(2026, 1, 10),
        "end_date": date(2026, 2, 28),
        "category": "Work",
    }
    names = list(values)
    for size in range(len(names)):
        for subset in combinations(names, size):
            base = {name: values[name] for name in subset}
            base_ids = set(ids(resolve(normalize(**base), tasks)))
            for extra in names:
                if extra in subset:
                    continue
                narrowed = resolve(normalize(**base, **{extra: values[extra]}), tasks)
                assert set(ids(narrowed)) <= base_ids


def test_result_preserves_collection_order(tasks) -> None:
    reordered = [tasks[3], tasks[0]]
    assert ids(resolve(normalize(category="Work"), reordered)) == ["4", "1"]
