from __future__ import annotations

import logging

import pytest

from projecthub.domain.ports.fetching import ContributionFetchError
from projecthub.domain.reconciliation import ReconciliationEngine, UnassignedContributionCache
from tests.helpers.projects import (
    FakeCatalog,
    FakeContributionFetcher,
    make_contribution,
    make_project,
)


def _engine(
    fetcher: FakeContributionFetcher,
    catalog: FakeCatalog,
    cache: UnassignedContributionCache | None = None,
) -> ReconciliationEngine:
    return ReconciliationEngine(
        fetcher=fetcher,
        unit_of_work_factory=catalog,
        unassigned_cache=cache if cache is not None else UnassignedContributionCache(),
    )


def test_run_pass_assigns_matching_contributions_and_publishes_the_rest() -> None:
    app = make_contribution("https://github.com/acme/app", day="2024-01-01", count=3)
    other = make_contribution("https://github.com/other/x", day="2024-01-01")
    lib = make_contribution("https://github.com/acme/lib", day="2024-01-02")
    catalog = FakeCatalog([make_project("Acme", patterns=["github.com/acme/*"], project_id="p1")])
    cache = UnassignedContributionCache()

    result = _engine(FakeContributionFetcher([app, other, lib]), catalog, cache).run_pass()

    assert catalog.stored("p1").contributions == [app, lib]
    assert catalog.stored("p1").contributions[0].extra == {"count": 3}
    assert cache.snapshot() == (other,)
    assert result.fetched == 3
    assert result.assigned == 2
    assert result.unassigned == 1
    assert result.updated_projects == ("p1",)
    assert result.missing_projects == ()
    assert result.failed_projects == ()


def test_run_pass_replaces_stale_contributions() -> None:
    stale = make_contribution("github.com/acme/gone", day="2023-01-01")
    fresh = make_contribution("github.com/acme/app", day="2024-01-01")
    catalog = FakeCatalog(
        [make_project(patterns=["github.com/acme/*"], project_id="p1", contributions=[stale])]
    )

    _engine(FakeContributionFetcher([fresh]), catalog).run_pass()

    assert catalog.stored("p1").contributions == [fresh]


def test_run_pass_clears_contributions_of_projects_without_matches() -> None:
    previous = make_contribution("github.com/acme/app")
    catalog = FakeCatalog(
        [make_project(patterns=["github.com/acme/*"], project_id="p1", contributions=[previous])]
    )

    result = _engine(FakeContributionFetcher([]), catalog).run_pass()

    assert catalog.stored("p1").contributions == []
    assert result.updated_projects == ("p1",)
    assert result.fetched == 0


def test_run_pass_assigns_shared_contribution_to_all_matching_projects() -> None:
    shared = make_contribution("github.com/acme/app")
    catalog = FakeCatalog(
        [
            make_project("Broad", patterns=["github.com/acme/*"], project_id="broad"),
            make_project("Narrow", patterns=["github.com/acme/app"], project_id="narrow"),
        ]
    )

    result = _engine(FakeContributionFetcher([shared]), catalog).run_pass()

    assert catalog.stored("broad").contributions == [shared]
    assert catalog.stored("narrow").contributions == [shared]
    assert result.assigned == 2
    assert result.unassigned == 0


def test_fetch_failure_leaves_catalog_and_cache_untouched() -> None:
    kept = make_contribution("github.com/acme/app")
    previous_unassigned = make_contribution("github.com/other/x")
    catalog = FakeCatalog(
        [make_project(patterns=["github.com/acme/*"], project_id="p1", contributions=[kept])]
    )
    cache = UnassignedContributionCache()
    cache.publish([previous_unassigned])
    fetcher = FakeContributionFetcher([make_contribution("github.com/acme/new")])
    fetcher.fail()

    with pytest.raises(ContributionFetchError):
        _engine(fetcher, catalog, cache).run_pass()

    assert catalog.stored("p1").contributions == [kept]
    assert catalog.repository.saved == []
    assert catalog.commits == 0
    assert cache.snapshot() == (previous_unassigned,)


def test_project_deleted_mid_pass_is_skipped() -> None:
    contribution = make_contribution("github.com/acme/app")
    ghost = make_project("Ghost", patterns=["github.com/acme/*"], project_id="ghost")
    live = make_project("Live", patterns=["github.com/acme/*"], project_id="live")
    catalog = FakeCatalog([live], phantoms=[ghost])

    result = _engine(FakeContributionFetcher([contribution]), catalog).run_pass()

    assert result.missing_projects == ("ghost",)
    assert result.updated_projects == ("live",)
    assert catalog.repository.get("ghost") is None
    assert catalog.stored("live").contributions == [contribution]


def test_save_failure_is_logged_and_pass_continues(caplog: pytest.LogCaptureFixture) -> None:
    contribution = make_contribution("github.com/acme/app")
    unclaimed = make_contribution("github.com/other/x")
    catalog = FakeCatalog(
        [
            make_project("Bad", patterns=["github.com/acme/*"], project_id="bad"),
            make_project("Good", patterns=["github.com/acme/*"], project_id="good"),
        ],
        failing_ids=["bad"],
    )
    cache = UnassignedContributionCache()

    with caplog.at_level(logging.ERROR):
        result = _engine(FakeContributionFetcher([contribution, unclaimed]), catalog, cache).run_pass()

    assert result.failed_projects == ("bad",)
    assert result.updated_projects == ("good",)
    assert catalog.stored("good").contributions == [contribution]
    assert catalog.stored("bad").contributions == []
    assert catalog.rollbacks == 1
    assert cache.snapshot() == (unclaimed,)
    assert "bad" in caplog.text


def test_run_pass_end_to_end_with_one_project() -> None:
    batch = [
        make_contribution("https://github.com/acme/app", day="2024-01-01"),
        make_contribution("https://github.com/zeta/tool", day="2024-01-01"),
    ]
    catalog = FakeCatalog([make_project(patterns=["github.com/acme/*"], project_id="p1")])
    cache = UnassignedContributionCache()

    _engine(FakeContributionFetcher(batch), catalog, cache).run_pass()

    assert catalog.stored("p1").contributions == [batch[0]]
    assert list(cache.snapshot()) == [batch[1]]


def test_run_pass_publishes_into_the_given_empty_cache() -> None:
    cache = UnassignedContributionCache()
    stray = make_contribution("https://github.com/other/x")
    assert len(cache) == 0

    engine = _engine(FakeContributionFetcher([stray]), FakeCatalog(), cache)
    engine.run_pass()

    assert engine.unassigned_cache is cache
    assert cache.snapshot() == (stray,)
