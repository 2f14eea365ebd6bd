from __future__ import annotations

import pytest

from projecthub.domain.projects import ProjectNotFoundError, ProjectService
from projecthub.domain.reconciliation import ReconciliationEngine, UnassignedContributionCache
from tests.helpers.projects import (
    FakeCatalog,
    FakeContributionFetcher,
    make_contribution,
    make_project,
)


class RecordingTrigger:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def _service(
    catalog: FakeCatalog,
    trigger: RecordingTrigger | None = None,
    cache: UnassignedContributionCache | None = None,
) -> ProjectService:
    return ProjectService(
        unit_of_work_factory=catalog,
        unassigned_cache=cache if cache is not None else UnassignedContributionCache(),
        on_catalog_change=trigger,
    )


def test_create_project_persists_and_triggers_reconciliation() -> None:
    catalog = FakeCatalog()
    trigger = RecordingTrigger()

    created = _service(catalog, trigger).create_project(
        name="Acme",
        description="Tools",
        additional_info={"url": "https://acme.test"},
        repository_patterns=["github.com/acme/*"],
    )

    stored = catalog.stored(created.id)
    assert stored.name == "Acme"
    assert stored.description == "Tools"
    assert stored.visible is True
    assert stored.additional_info == {"url": "https://acme.test"}
    assert stored.repository_patterns == ["github.com/acme/*"]
    assert catalog.commits == 1
    assert trigger.calls == 1


def test_create_project_returns_reconciled_contributions() -> None:
    catalog = FakeCatalog()
    cache = UnassignedContributionCache()
    app = make_contribution("https://github.com/acme/app")
    other = make_contribution("https://github.com/other/x")
    engine = ReconciliationEngine(
        fetcher=FakeContributionFetcher([app, other]),
        unit_of_work_factory=catalog,
        unassigned_cache=cache,
    )
    service = ProjectService(
        unit_of_work_factory=catalog,
        unassigned_cache=cache,
        on_catalog_change=engine.run_pass,
    )

    created = service.create_project(name="Acme", repository_patterns=["github.com/acme/*"])

    assert created.contributions == [app]
    assert service.get_unassigned_contributions() == (other,)


def test_create_project_ids_are_unique() -> None:
    service = _service(FakeCatalog())

    first = service.create_project(name="One")
    second = service.create_project(name="Two")

    assert first.id != second.id


def test_update_project_replaces_editable_fields() -> None:
    project = make_project("Old", patterns=["github.com/old/*"], project_id="p1", order_index=4)
    catalog = FakeCatalog([project])
    trigger = RecordingTrigger()

    updated = _service(catalog, trigger).update_project(
        "p1",
        name="New",
        description="Renamed",
        additional_info={"k": "v"},
        repository_patterns=["github.com/new/*"],
    )

    assert updated.name == "New"
    stored = catalog.stored("p1")
    assert stored.description == "Renamed"
    assert stored.additional_info == {"k": "v"}
    assert stored.repository_patterns == ["github.com/new/*"]
    assert stored.order_index == 4
    assert trigger.calls == 1


def test_update_missing_project_still_reconciles_then_raises() -> None:
    trigger = RecordingTrigger()
    service = _service(FakeCatalog(), trigger)

    with pytest.raises(ProjectNotFoundError) as excinfo:
        service.update_project(
            "missing",
            name="x",
            description="",
            additional_info=None,
            repository_patterns=None,
        )

    assert excinfo.value.project_id == "missing"
    assert trigger.calls == 1


def test_delete_project_removes_it() -> None:
    catalog = FakeCatalog([make_project(project_id="p1")])
    service = _service(catalog)

    service.delete_project("p1")

    assert catalog.repository.get("p1") is None
    with pytest.raises(ProjectNotFoundError):
        service.delete_project("p1")


def test_get_project_raises_for_unknown_id() -> None:
    with pytest.raises(ProjectNotFoundError):
        _service(FakeCatalog()).get_project("nope")


def test_list_projects_orders_by_index_then_name_and_filters_hidden() -> None:
    catalog = FakeCatalog(
        [
            make_project("zeta", project_id="a"),
            make_project("Alpha", project_id="b"),
            make_project("second", project_id="c", order_index=2),
            make_project("first", project_id="d", order_index=1),
            make_project("hidden", project_id="e", order_index=0, visible=False),
        ]
    )
    service = _service(catalog)

    assert [p.id for p in service.list_projects()] == ["e", "d", "c", "b", "a"]
    assert [p.id for p in service.list_projects(include_hidden=False)] == ["d", "c", "b", "a"]


def test_set_order_index_and_toggle_visibility() -> None:
    catalog = FakeCatalog([make_project(project_id="p1")])
    trigger = RecordingTrigger()
    service = _service(catalog, trigger)

    assert service.set_order_index("p1", 7).order_index == 7
    assert service.toggle_visibility("p1").visible is False
    assert service.toggle_visibility("p1").visible is True
    assert catalog.stored("p1").order_index == 7
    assert trigger.calls == 0


@pytest.mark.parametrize("operation", ["set_order_index", "toggle_visibility"])
def test_field_updates_raise_for_unknown_project(operation: str) -> None:
    service = _service(FakeCatalog())

    with pytest.raises(ProjectNotFoundError):
        if operation == "set_order_index":
            service.set_order_index("missing", 1)
        else:
            service.toggle_visibility("missing")


def test_unassigned_contributions_come_from_cache() -> None:
    cache = UnassignedContributionCache()
    contribution = make_contribution()
    cache.publish([contribution])

    assert _service(FakeCatalog(), cache=cache).get_unassigned_contributions() == (contribution,)
