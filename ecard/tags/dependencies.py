from ecard.tags.repository.read_models import SqlTagReadModel, TagReadModel
from ecard.tags.repository.write_models import SqlTagWriteModel, TagWriteModel


def get_tag_read_model() -> TagReadModel:
    """Dependency to get tag read model instance."""
    return SqlTagReadModel()


def get_tag_write_model() -> TagWriteModel:
    """Dependency to get tag write model instance."""
    return SqlTagWriteModel()
