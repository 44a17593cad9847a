from ecard.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from ecard.guests.repository.write_models import GuestWriteModel, SqlGuestWriteModel


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


def get_guest_write_model() -> GuestWriteModel:
    """Dependency to get guest write model instance."""
    return SqlGuestWriteModel()
