from dependency_injector import containers, providers

from lawncare.config import get_settings
from lawncare.infrastructure.common.clock import SystemClock
from lawncare.infrastructure.common.id_generator import UuidIdGenerator
from lawncare.infrastructure.common.seed import create_lawn_care_store


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Collaborators of the store
    clock = providers.Singleton(SystemClock)
    id_generator = providers.Singleton(UuidIdGenerator)

    # One store per process; all state lives in memory
    lawn_care_store = providers.Singleton(
        create_lawn_care_store,
        clock=clock,
        id_generator=id_generator,
        seed_demo_data=settings.provided.SEED_DEMO_DATA,
    )
