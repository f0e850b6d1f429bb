from .camera import Camera
from .duration import Duration
from .global_stage import GlobalStage
from .identifiers import RelatedSampleIds, SampleId, StreamId
from .lens import Lens
from .protocol import Protocol
from .timing import Timing
from .tracker import Tracker
from .transforms import Transforms
from enum import StrEnum
import logging
from pydantic import BaseModel, Field
from typing import Any, Callable, Final, Iterable


logger = logging.getLogger(__name__)


class EntityLabel(StrEnum):
    CAMERA = "camera"
    DURATION = "duration"
    GLOBAL_STAGE = "globalStage"
    LENS = "lens"
    PROTOCOL = "protocol"
    RELATED_SAMPLE_IDS = "relatedSampleIds"
    SAMPLE_ID = "sampleId"
    STREAM_ID = "streamId"
    TIMING = "timing"
    TRACKER = "tracker"
    TRANSFORMS = "transforms"


# Parsers are independent of one another, this order only fixes the order of diagnostics
ENTITY_PARSERS: Final[dict[EntityLabel, Callable[[dict, list[str]], Any]]] = {
    EntityLabel.PROTOCOL: Protocol.parse,
    EntityLabel.SAMPLE_ID: SampleId.parse,
    EntityLabel.STREAM_ID: StreamId.parse,
    EntityLabel.RELATED_SAMPLE_IDS: RelatedSampleIds.parse,
    EntityLabel.TIMING: Timing.parse,
    EntityLabel.DURATION: Duration.parse,
    EntityLabel.CAMERA: Camera.parse,
    EntityLabel.LENS: Lens.parse,
    EntityLabel.TRACKER: Tracker.parse,
    EntityLabel.TRANSFORMS: Transforms.parse,
    EntityLabel.GLOBAL_STAGE: GlobalStage.parse}


class Sample(BaseModel):
    """
    One time-sampled snapshot. Every entity is independently optional.
    """
    protocol: Protocol | None = Field(default=None)
    sample_id: SampleId | None = Field(default=None)
    stream_id: StreamId | None = Field(default=None)
    related_sample_ids: RelatedSampleIds | None = Field(default=None)
    timing: Timing | None = Field(default=None)
    duration: Duration | None = Field(default=None)
    camera: Camera | None = Field(default=None)
    lens: Lens | None = Field(default=None)
    tracker: Tracker | None = Field(default=None)
    transforms: Transforms | None = Field(default=None)
    global_stage: GlobalStage | None = Field(default=None)

    @staticmethod
    def entity_labels() -> list[EntityLabel]:
        return list(ENTITY_PARSERS.keys())

    @staticmethod
    def parse(
        document: Any,
        errors: list[str],
        entity_labels: Iterable[EntityLabel] | None = None
    ) -> "Sample | None":
        """
        :param document: Decoded document root
        :param errors: Diagnostics sink, shared by every entity parser
        :param entity_labels: Restrict parsing to these entities. Default all.
        :return: The sample (possibly with every entity absent), or None if the document is not an object
        """
        if not isinstance(document, dict):
            errors.append("field: sample isn't of type: object")
            return None

        selected: set[EntityLabel]
        if entity_labels is None:
            selected = set(ENTITY_PARSERS.keys())
        else:
            selected = set(entity_labels)

        error_count_before: int = len(errors)
        entities: dict[str, Any] = dict()
        for label, parser in ENTITY_PARSERS.items():
            if label not in selected:
                continue
            entities[_ENTITY_ATTRIBUTES[label]] = parser(document, errors)
        sample: Sample = Sample(**entities)

        new_error_count: int = len(errors) - error_count_before
        if new_error_count > 0:
            logger.warning(f"Sample was parsed with {new_error_count} diagnostic(s).")
        else:
            logger.debug("Sample was parsed without diagnostics.")
        return sample


_ENTITY_ATTRIBUTES: Final[dict[EntityLabel, str]] = {
    EntityLabel.CAMERA: "camera",
    EntityLabel.DURATION: "duration",
    EntityLabel.GLOBAL_STAGE: "global_stage",
    EntityLabel.LENS: "lens",
    EntityLabel.PROTOCOL: "protocol",
    EntityLabel.RELATED_SAMPLE_IDS: "related_sample_ids",
    EntityLabel.SAMPLE_ID: "sample_id",
    EntityLabel.STREAM_ID: "stream_id",
    EntityLabel.TIMING: "timing",
    EntityLabel.TRACKER: "tracker",
    EntityLabel.TRANSFORMS: "transforms"}
