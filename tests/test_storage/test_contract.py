"""Behaviour shared by every storage backend."""

import pytest

from projectstore.errors import DuplicateKeyError, NotFoundError
from projectstore.models import Project


@pytest.fixture
def bridge():
    return Project("Bridge", "Civil", 1500.0)


@pytest.fixture
def tunnel():
    return Project("Tunnel", "Civil", 3000.0)


@pytest.fixture
async def populated(storage):
    """Backend holding a small mixed set of projects."""
    for project in [
        Project("Bridge", "Civil", 1500.0),
        Project("Tunnel", "Civil", 3000.0),
        Project("Dam", "Hydro", 5000.0),
        Project("Canal", "Hydro", 0.0),
        Project("Road", "civil", 1500.0),
    ]:
        await storage.add(project)
    return storage


class TestStorageContract:
    """CRUD tests run against both backends."""

    async def test_add_then_get(self, storage, bridge):
        """Test add followed by get returns an equal project."""
        await storage.add(bridge)

        stored = await storage.get("Bridge")

        assert stored == bridge
        assert stored.area == "Civil"
        assert stored.cost == 1500.0

    async def test_get_missing_returns_none(self, storage):
        """Test get on an unknown name."""
        assert await storage.get("Nothing") is None

    async def test_duplicate_add_fails(self, storage, bridge):
        """Test second add with the same name."""
        await storage.add(bridge)

        with pytest.raises(DuplicateKeyError):
            await storage.add(Project("Bridge", "Other", 1.0))

        stored = await storage.get("Bridge")
        assert stored.area == "Civil"

    async def test_delete_then_get(self, storage, bridge):
        """Test deleted projects are gone."""
        await storage.add(bridge)

        await storage.delete("Bridge")

        assert await storage.get("Bridge") is None

    async def test_delete_missing_fails(self, storage):
        """Test delete on an unknown name."""
        with pytest.raises(NotFoundError):
            await storage.delete("Nothing")

    async def test_update_missing_fails(self, storage, bridge):
        """Test update on an unknown name."""
        with pytest.raises(NotFoundError):
            await storage.update(bridge)

    async def test_update_replaces_fields(self, storage, bridge):
        """Test update replaces area and cost, keeping identity."""
        await storage.add(bridge)

        await storage.update(Project("Bridge", "Structural", 1750.5))

        stored = await storage.get("Bridge")
        assert stored == bridge
        assert stored.area == "Structural"
        assert stored.cost == 1750.5
        assert len(await storage.list_all()) == 1

    async def test_list_all(self, storage, bridge, tunnel):
        """Test listing returns every project."""
        await storage.add(bridge)
        await storage.add(tunnel)

        projects = await storage.list_all()

        assert sorted(p.name for p in projects) == ["Bridge", "Tunnel"]
        assert projects.complete is True

    async def test_list_empty(self, storage):
        """Test listing an empty store."""
        projects = await storage.list_all()

        assert len(projects) == 0
        assert projects == []


class TestStorageQueries:
    """Filter and count tests run against both backends."""

    @pytest.mark.parametrize(
        "threshold,expected",
        [
            (-1.0, {"Bridge", "Tunnel", "Dam", "Canal", "Road"}),
            (0.0, {"Bridge", "Tunnel", "Dam", "Road"}),
            (1500.0, {"Tunnel", "Dam"}),
            (2000.0, {"Tunnel", "Dam"}),
            (5000.0, set()),
            (1e9, set()),
        ],
    )
    async def test_list_above_cost(self, populated, threshold, expected):
        """Test the filter is strictly greater-than."""
        projects = await populated.list_above_cost(threshold)

        assert {p.name for p in projects} == expected
        assert all(p.cost > threshold for p in projects)

    @pytest.mark.parametrize(
        "min_cost,area,expected",
        [
            (1500.0, "Civil", 2),
            (1500.01, "Civil", 1),
            (0.0, "Hydro", 2),
            (0.0, "civil", 1),
            (0.0, "CIVIL", 0),
            (0.0, "Mining", 0),
            (10000.0, "Hydro", 0),
        ],
    )
    async def test_count_by_criteria(self, populated, min_cost, area, expected):
        """Test count uses cost >= min_cost and exact area."""
        assert await populated.count_by_criteria(min_cost, area) == expected

    async def test_example_scenario(self, storage):
        """Test the reference add/filter/count/delete walkthrough."""
        await storage.add(Project("Bridge", "Civil", 1500.0))
        await storage.add(Project("Tunnel", "Civil", 3000.0))

        above = await storage.list_above_cost(2000.0)
        assert [p.name for p in above] == ["Tunnel"]

        assert await storage.count_by_criteria(1500.0, "Civil") == 2

        await storage.delete("Bridge")
        remaining = await storage.list_all()
        assert [p.name for p in remaining] == ["Tunnel"]

    async def test_stats(self, storage, bridge):
        """Test statistics reflect operations."""
        await storage.add(bridge)
        await storage.get("Bridge")
        await storage.delete("Bridge")

        stats = await storage.get_stats()

        assert stats["records_written"] == 1
        assert stats["records_deleted"] == 1
        assert stats["total_records"] == 0
        assert stats["backend"] == storage.name
