from ..field_access import ArrayPolicy, FieldAccess, FieldType, Patterns
from pydantic import BaseModel, Field


class SampleId(BaseModel):
    """
    URN-UUID uniquely identifying one sample.
    """
    value: str = Field()

    def __str__(self):
        return self.value

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "SampleId | None":
        value: str | None = FieldAccess.get_pattern_field(document, "sampleId", Patterns.URN_UUID, errors)
        if value is None:
            return None
        return SampleId(value=value)


class StreamId(BaseModel):
    """
    URN-UUID identifying the stream of samples from one tracking source.
    """
    value: str = Field()

    def __str__(self):
        return self.value

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "StreamId | None":
        value: str | None = FieldAccess.get_pattern_field(document, "streamId", Patterns.URN_UUID, errors)
        if value is None:
            return None
        return StreamId(value=value)


class RelatedSampleIds(BaseModel):
    samples: list[str] = Field(default_factory=list)

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "RelatedSampleIds | None":
        # Bad identifiers are dropped individually
        samples: list[str] | None = FieldAccess.get_array(
            container=document,
            key="relatedSampleIds",
            element_type=FieldType.STRING,
            errors=errors,
            policy=ArrayPolicy.SKIP,
            pattern=Patterns.URN_UUID)
        if samples is None:
            return None
        return RelatedSampleIds(samples=samples)
