from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import inspect, text

from projecthub.adapters.sqlalchemy import SqlAlchemyProjectRepository
from tests.helpers.projects import make_contribution, make_project

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session


def test_migrations_create_project_table(sqlite_engine: Engine) -> None:
    inspector = inspect(sqlite_engine)

    columns = {column["name"] for column in inspector.get_columns("project")}

    assert columns == {
        "id",
        "name",
        "description",
        "visible",
        "order_index",
        "additional_info",
        "repository_patterns",
        "contributions",
    }


def test_save_and_get_round_trip(sqlite_session: Session) -> None:
    repo = SqlAlchemyProjectRepository(sqlite_session)
    contribution = make_contribution("github.com/acme/app", day="d1", commits=2)
    project = make_project(
        "Acme",
        patterns=["github.com/acme/*"],
        order_index=3,
        contributions=[contribution],
    )
    project.additional_info = {"homepage": "https://acme.test"}

    repo.save(project)
    sqlite_session.commit()
    sqlite_session.expunge_all()

    loaded = repo.get(project.id)
    assert loaded is not None
    assert loaded.name == "Acme"
    assert loaded.order_index == 3
    assert loaded.visible is True
    assert loaded.additional_info == {"homepage": "https://acme.test"}
    assert loaded.repository_patterns == ["github.com/acme/*"]
    assert loaded.contributions == [contribution]


def test_contributions_are_stored_as_wire_payloads(sqlite_session: Session) -> None:
    repo = SqlAlchemyProjectRepository(sqlite_session)
    project = make_project(contributions=[make_contribution("github.com/acme/app", day="d1")])

    repo.save(project)
    sqlite_session.commit()

    raw = sqlite_session.execute(
        text("SELECT contributions FROM project WHERE id = :id"), {"id": project.id}
    ).scalar_one()
    assert '"repositoryUrl"' in raw
    assert '"day"' in raw


def test_save_overwrites_existing_record(sqlite_session: Session) -> None:
    repo = SqlAlchemyProjectRepository(sqlite_session)
    project = make_project("Before", project_id="p1")
    repo.save(project)
    sqlite_session.commit()
    sqlite_session.expunge_all()

    replacement = make_project("After", project_id="p1", visible=False)
    repo.save(replacement)
    sqlite_session.commit()
    sqlite_session.expunge_all()

    loaded = repo.get("p1")
    assert loaded is not None
    assert loaded.name == "After"
    assert loaded.visible is False
    assert len(repo.list_all()) == 1


def test_reassigning_contributions_is_persisted(sqlite_session: Session) -> None:
    repo = SqlAlchemyProjectRepository(sqlite_session)
    repo.save(make_project(project_id="p1", contributions=[make_contribution("old")]))
    sqlite_session.commit()

    loaded = repo.get("p1")
    assert loaded is not None
    loaded.contributions = [make_contribution("new")]
    repo.save(loaded)
    sqlite_session.commit()
    sqlite_session.expunge_all()

    reloaded = repo.get("p1")
    assert reloaded is not None
    assert [c.repository_url for c in reloaded.contributions] == ["new"]


def test_list_all_and_delete(sqlite_session: Session) -> None:
    repo = SqlAlchemyProjectRepository(sqlite_session)
    repo.save(make_project("A", project_id="a"))
    repo.save(make_project("B", project_id="b"))
    sqlite_session.commit()

    assert [project.id for project in repo.list_all()] == ["a", "b"]
    assert repo.delete("a") is True
    assert repo.delete("a") is False
    sqlite_session.commit()
    assert [project.id for project in repo.list_all()] == ["b"]


def test_get_unknown_id_returns_none(sqlite_session: Session) -> None:
    assert SqlAlchemyProjectRepository(sqlite_session).get("missing") is None


def test_delete_twice_in_one_session_reports_missing(sqlite_session: Session) -> None:
    repo = SqlAlchemyProjectRepository(sqlite_session)
    repo.save(make_project("A", project_id="a"))
    sqlite_session.commit()

    assert repo.delete("a") is True
    assert repo.delete("a") is False
    assert repo.get("a") is None
