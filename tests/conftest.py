import pytest

from balanced_quick_sort import partitioning


@pytest.fixture(autouse=True)
def check_invariants(monkeypatch):
    monkeypatch.setattr(partitioning, "CHECK_INVARIANTS", True)


@pytest.fixture
def no_invariant_checks(monkeypatch):
    monkeypatch.setattr(partitioning, "CHECK_INVARIANTS", False)
