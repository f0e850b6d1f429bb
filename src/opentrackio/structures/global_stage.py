from ..field_access import FieldAccess, FieldType
from pydantic import BaseModel, Field
from typing import Final


# Evaluation order, matching the member order of the record
GLOBAL_STAGE_KEYS: Final[list[str]] = ["E", "N", "U", "lat0", "lon0", "h0"]


class GlobalStage(BaseModel):
    """
    Position of the stage origin: east/north/up offsets in meters within a local tangent plane,
    anchored at a geodetic latitude/longitude (degrees) and height (meters).
    """
    e: float = Field()
    n: float = Field()
    u: float = Field()
    lat0: float = Field()
    lon0: float = Field()
    h0: float = Field()

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "GlobalStage | None":
        if "globalStage" not in document:
            return None
        global_stage_json: dict | None = FieldAccess.get_object(document, "globalStage", errors)
        if global_stage_json is None:
            return None

        # Stops at the first failing member, so a rejected record carries exactly one diagnostic
        values: dict[str, float] = dict()
        for key in GLOBAL_STAGE_KEYS:
            if key not in global_stage_json:
                errors.append(f"field: globalStage is missing require field: {key}")
                return None
            if not FieldAccess.is_type(global_stage_json[key], FieldType.DOUBLE):
                errors.append(f"field: globalStage/{key} isn't a number")
                return None
            values[key.lower()] = float(global_stage_json[key])

        return GlobalStage(**values)
