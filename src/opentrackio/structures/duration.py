from ..field_access import FieldAccess, FieldType
from .types import Rational
from pydantic import BaseModel, Field


class Duration(BaseModel):
    """
    Duration of the clip this sample belongs to, in seconds.
    """
    rational: Rational = Field()

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "Duration | None":
        present, duration_json = FieldAccess.get_static_object(document, "duration", errors)
        if not present or duration_json is None:
            return None

        num: int | None = FieldAccess.get_field(duration_json, "num", FieldType.UINT32, errors, "duration")
        denom: int | None = FieldAccess.get_field(duration_json, "denom", FieldType.UINT32, errors, "duration")
        if num is None or denom is None:
            errors.append("field: duration is missing required fields")
            return None
        if denom == 0:
            errors.append("field: duration/denom must be greater than zero")
            return None

        return Duration(rational=Rational(num=num, denom=denom))
