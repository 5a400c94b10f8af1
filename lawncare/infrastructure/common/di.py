from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.core import container


def get_lawn_care_store() -> LawnCareStore:
    """
    FastAPI dependency resolving the process-wide store.

    Tests swap the store through app.dependency_overrides.
    """
    return container.lawn_care_store()
