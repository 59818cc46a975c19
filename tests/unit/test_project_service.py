"""Unit tests for ProjectService."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from src.api.middleware.error_handler import NotFoundError
from src.core.memory_store import InMemoryRecordStore
from src.core.record_store import RecordKind
from src.schemas.project import ProjectCreate, ProjectUpdate
from src.services.project_service import ProjectService, coerce_technologies


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def project_service(store: InMemoryRecordStore) -> ProjectService:
    """Create ProjectService over an empty memory store."""
    return ProjectService(store=store)


def _create_data(**overrides) -> ProjectCreate:
    data = {
        "title": "Portfolio",
        "description": "Personal site",
        "image_url": "https://img.example/cover.png",
        "github_url": "https://github.com/me/portfolio",
        "demo_url": "https://me.example",
        "technologies": ["React", "TypeScript", "Node.js"],
    }
    data.update(overrides)
    return ProjectCreate(**data)


class TestCreateProject:
    """Tests for create_project method."""

    @pytest.mark.asyncio
    async def test_creates_with_all_fields(self, project_service: ProjectService) -> None:
        project = await project_service.create_project(_create_data())

        assert project["id"] == 1
        assert project["title"] == "Portfolio"
        assert project["technologies"] == ["React", "TypeScript", "Node.js"]
        assert project["created_at"] == project["updated_at"]

    @pytest.mark.asyncio
    async def test_defaults_for_omitted_fields(self, project_service: ProjectService) -> None:
        project = await project_service.create_project(ProjectCreate(title="T", description="D"))

        assert project["image_url"] is None
        assert project["github_url"] is None
        assert project["demo_url"] is None
        assert project["technologies"] == []

    @pytest.mark.asyncio
    async def test_duplicate_titles_allowed(self, project_service: ProjectService) -> None:
        first = await project_service.create_project(_create_data(description="one"))
        second = await project_service.create_project(_create_data(description="two"))

        assert first["id"] != second["id"]
        assert len(await project_service.list_projects()) == 2


class TestListProjects:
    """Tests for list_projects method."""

    @pytest.mark.asyncio
    async def test_empty(self, project_service: ProjectService) -> None:
        assert await project_service.list_projects() == []

    @pytest.mark.asyncio
    async def test_newest_first(self, project_service: ProjectService) -> None:
        """Test that projects created in sequence list in reverse order."""
        for title in ("P1", "P2", "P3"):
            await project_service.create_project(_create_data(title=title))

        titles = [project["title"] for project in await project_service.list_projects()]

        assert titles == ["P3", "P2", "P1"]

    @pytest.mark.asyncio
    async def test_sorts_by_created_at_not_id(
        self, project_service: ProjectService, store: InMemoryRecordStore
    ) -> None:
        """Test that an older row inserted later still lists after newer ones."""
        now = datetime.now(timezone.utc)
        store.insert(RecordKind.PROJECT, {"title": "new", "technologies": [], "created_at": now})
        store.insert(
            RecordKind.PROJECT,
            {"title": "old", "technologies": [], "created_at": now - timedelta(days=1)},
        )

        titles = [project["title"] for project in await project_service.list_projects()]

        assert titles == ["new", "old"]

    @pytest.mark.asyncio
    async def test_technologies_order_round_trip(self, project_service: ProjectService) -> None:
        await project_service.create_project(_create_data(technologies=["React", "TypeScript", "Node.js"]))

        projects = await project_service.list_projects()

        assert projects[0]["technologies"] == ["React", "TypeScript", "Node.js"]


class TestUpdateProject:
    """Tests for update_project method."""

    @pytest.mark.asyncio
    async def test_updates_only_provided_fields(self, project_service: ProjectService) -> None:
        created = await project_service.create_project(_create_data())

        updated = await project_service.update_project(created["id"], ProjectUpdate(title="Renamed"))

        assert updated["title"] == "Renamed"
        for field in ("description", "image_url", "github_url", "demo_url", "technologies"):
            assert updated[field] == created[field]

    @pytest.mark.asyncio
    async def test_explicit_nulls_clear_links(self, project_service: ProjectService) -> None:
        created = await project_service.create_project(_create_data())

        updated = await project_service.update_project(
            created["id"],
            ProjectUpdate.model_validate({"image_url": None, "github_url": None, "demo_url": None}),
        )

        assert updated["image_url"] is None
        assert updated["github_url"] is None
        assert updated["demo_url"] is None
        assert updated["title"] == "Portfolio"

    @pytest.mark.asyncio
    async def test_logs_cleared_fields(
        self, project_service: ProjectService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that only the fields sent as null are reported as cleared."""
        created = await project_service.create_project(_create_data())

        with caplog.at_level(logging.INFO, logger="src.services.project_service"):
            await project_service.update_project(
                created["id"],
                ProjectUpdate.model_validate({"title": "New", "demo_url": None, "image_url": None}),
            )

        assert f"Clearing image_url, demo_url on project {created['id']}" in caplog.text

    @pytest.mark.asyncio
    async def test_technologies_replaced_whole(self, project_service: ProjectService) -> None:
        created = await project_service.create_project(_create_data())

        updated = await project_service.update_project(created["id"], ProjectUpdate(technologies=["Go"]))
        emptied = await project_service.update_project(created["id"], ProjectUpdate(technologies=[]))

        assert updated["technologies"] == ["Go"]
        assert emptied["technologies"] == []

    @pytest.mark.asyncio
    async def test_timestamps(self, project_service: ProjectService) -> None:
        """Test that created_at is preserved and updated_at refreshed."""
        created = await project_service.create_project(_create_data())

        updated = await project_service.update_project(created["id"], ProjectUpdate())

        assert updated["created_at"] == created["created_at"]
        assert updated["updated_at"] >= created["updated_at"]

    @pytest.mark.asyncio
    async def test_missing_project_raises_not_found(
        self, project_service: ProjectService, store: InMemoryRecordStore
    ) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await project_service.update_project(999999, ProjectUpdate(title="x"))

        assert "999999" in exc_info.value.message
        assert exc_info.value.status_code == 404
        assert store.find(RecordKind.PROJECT) == []

    @pytest.mark.asyncio
    async def test_coerces_bad_stored_technologies(
        self, project_service: ProjectService, store: InMemoryRecordStore
    ) -> None:
        row = store.insert(RecordKind.PROJECT, {"title": "T", "description": "D", "technologies": None})

        updated = await project_service.update_project(row["id"], ProjectUpdate(title="T2"))

        assert updated["technologies"] == []


class TestDeleteProject:
    """Tests for delete_project method."""

    @pytest.mark.asyncio
    async def test_delete_twice(self, project_service: ProjectService) -> None:
        created = await project_service.create_project(_create_data())

        assert await project_service.delete_project(created["id"]) == {"success": True}
        assert await project_service.delete_project(created["id"]) == {"success": False}

    @pytest.mark.asyncio
    async def test_delete_zero_is_not_found(self, project_service: ProjectService) -> None:
        await project_service.create_project(_create_data())

        assert await project_service.delete_project(0) == {"success": False}

    @pytest.mark.asyncio
    async def test_deletes_only_target(self, project_service: ProjectService) -> None:
        keep = await project_service.create_project(_create_data(title="keep"))
        drop = await project_service.create_project(_create_data(title="drop"))

        await project_service.delete_project(drop["id"])

        assert [project["id"] for project in await project_service.list_projects()] == [keep["id"]]


class TestCoerceTechnologies:
    """Tests for coerce_technologies."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (["A", "B"], ["A", "B"]),
            ('["A", "B"]', ["A", "B"]),
            (None, []),
            ("not json", []),
            ({"A": 1}, []),
            (["A", None, "B"], ["A", "B"]),
        ],
    )
    def test_coercion(self, raw, expected) -> None:
        assert coerce_technologies(raw) == expected
