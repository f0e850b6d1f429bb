from .structures import EntityLabel, Sample
from src.common.util import IOUtils
import logging
from typing import Any, Iterable


logger = logging.getLogger(__name__)


class SampleLoader:
    """
    static class to read sample documents from files.
    """

    def __init__(self):
        raise RuntimeError(f"{__class__.__name__} is not meant to be instantiated.")

    @staticmethod
    def load(
        filepath: str,
        errors: list[str],
        entity_labels: Iterable[EntityLabel] | None = None
    ) -> Sample | None:
        """
        :param filepath: JSON (or hjson) file holding a single sample document
        :param errors: Diagnostics sink. File problems are appended to it as well.
        :param entity_labels: Restrict parsing to these entities. Default all.
        :return: The parsed sample, or None if the file could not be read or is not an object
        """
        document: Any = IOUtils.hjson_read(
            filepath=filepath,
            on_error_for_user=errors.append,
            on_error_for_dev=logger.error)
        if document is None:
            return None
        logger.debug(f"Parsing sample document {filepath}.")
        return Sample.parse(
            document=document,
            errors=errors,
            entity_labels=entity_labels)
