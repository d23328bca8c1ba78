"""Tests for compute_plan_statistics — pure rollups over plan-like rows, no IO."""

from types import SimpleNamespace

from app.core.plan_statistics import compute_plan_statistics


def _plan(id, name, members=(), exercises=(), price=89.9, trainer="Balestrin"):
    return SimpleNamespace(
        id=id, name=name, price=price, trainer=trainer,
        members=list(members), exercises=list(exercises),
    )


def _member(name, age, plan_id=1):
    return SimpleNamespace(
        id=hash(name), name=name, email=f"{name}@email.com", age=age, plan_id=plan_id,
    )


def test_empty_input_returns_empty_list():
    assert compute_plan_statistics([]) == []


def test_counts_members_and_uppercases_plan_name():
    plans = [
        _plan(1, "normal", members=[_member("Joao", 25), _member("Maria", 30)]),
        _plan(2, "premium", members=[_member("Carlos", 22, plan_id=2)]),
        _plan(3, "platina"),
    ]
    stats = compute_plan_statistics(plans)
    assert [s["total_members"] for s in stats] == [2, 1, 0]
    assert [s["plan"] for s in stats] == ["NORMAL", "PREMIUM", "PLATINA"]


def test_members_reduced_to_name_and_age():
    stats = compute_plan_statistics([_plan(1, "normal", members=[_member("Ana", 28)])])
    assert stats[0]["members"] == [{"name": "Ana", "age": 28}]


def test_exercises_listed_in_full():
    exercise = SimpleNamespace(
        id=7, name="Barra Fixa", description="Para desenvolvimento dorsal", plan_id=1,
    )
    stats = compute_plan_statistics([_plan(1, "normal", exercises=[exercise])])
    assert stats[0]["exercises"] == [{
        "id": 7, "name": "Barra Fixa",
        "description": "Para desenvolvimento dorsal", "plan_id": 1,
    }]


def test_trainer_and_price_copied():
    stats = compute_plan_statistics([_plan(1, "platina", price=199.9, trainer="Carlão")])
    assert stats[0]["trainer"] == "Carlão"
    assert stats[0]["price"] == 199.9


def test_preserves_input_order():
    plans = [_plan(3, "platina"), _plan(1, "normal")]
    assert [s["plan"] for s in compute_plan_statistics(plans)] == ["PLATINA", "NORMAL"]
