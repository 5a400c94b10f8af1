"""Tests for the dependency container and the store collaborators."""

from lawncare.infrastructure.common.clock import SystemClock
from lawncare.infrastructure.common.id_generator import UuidIdGenerator
from lawncare.infrastructure.container import Container


class TestCollaborators:
    def test_system_clock_is_timezone_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None

    def test_ids_are_prefixed_and_unique(self) -> None:
        generator = UuidIdGenerator()
        ids = {generator.new_id("exp") for _ in range(100)}
        assert len(ids) == 100
        assert all(new_id.startswith("exp-") for new_id in ids)


class TestContainer:
    def test_store_is_a_singleton(self) -> None:
        container = Container()
        assert container.lawn_care_store() is container.lawn_care_store()

    def test_store_follows_seed_setting(self) -> None:
        container = Container()
        settings = container.settings()
        store = container.lawn_care_store()
        assert bool(store.list_inventory()) is settings.SEED_DEMO_DATA
