from ecard.responses.repository.read_models import ResponseReadModel, SqlResponseReadModel
from ecard.responses.repository.write_models import ResponseWriteModel, SqlResponseWriteModel


def get_response_read_model() -> ResponseReadModel:
    """Dependency to get response read model instance."""
    return SqlResponseReadModel()


def get_response_write_model() -> ResponseWriteModel:
    """Dependency to get response write model instance."""
    return SqlResponseWriteModel()
