from ..field_access import FieldAccess, FieldType
from pydantic import BaseModel, Field
from typing import Any, ClassVar


def _object_or_error(
    node: Any,
    errors: list[str],
    path: str
) -> dict | None:
    if not isinstance(node, dict):
        errors.append(f"field: {path} isn't of type: object")
        return None
    return node


class Rational(BaseModel):
    num: int = Field()
    denom: int = Field()

    def as_float(self) -> float:
        return self.num / self.denom

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str
    ) -> "Rational | None":
        rational_json: dict | None = _object_or_error(node, errors, path)
        if rational_json is None:
            return None
        num: int | None = FieldAccess.get_field(rational_json, "num", FieldType.UINT32, errors, path)
        denom: int | None = FieldAccess.get_field(rational_json, "denom", FieldType.UINT32, errors, path)
        if "num" not in rational_json or "denom" not in rational_json:
            errors.append(f"field: {path} is missing required fields")
            return None
        if num is None or denom is None:
            return None
        if denom == 0:
            errors.append(f"field: {path}/denom must be greater than zero")
            return None
        return Rational(num=num, denom=denom)


class Dimensions(BaseModel):
    height: int | float = Field()
    width: int | float = Field()

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str,
        value_type: FieldType = FieldType.DOUBLE
    ) -> "Dimensions | None":
        """
        :param value_type: DOUBLE for physical sizes, an integer width for pixel counts
        """
        dimensions_json: dict | None = _object_or_error(node, errors, path)
        if dimensions_json is None:
            return None
        height = FieldAccess.get_field(dimensions_json, "height", value_type, errors, path)
        width = FieldAccess.get_field(dimensions_json, "width", value_type, errors, path)
        if "height" not in dimensions_json or "width" not in dimensions_json:
            errors.append(f"field: {path} is missing required fields")
            return None
        if height is None or width is None:
            return None
        return Dimensions(height=height, width=width)


class Timestamp(BaseModel):
    seconds: int = Field()
    nanoseconds: int = Field()
    attoseconds: int | None = Field(default=None)

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str
    ) -> "Timestamp | None":
        timestamp_json: dict | None = _object_or_error(node, errors, path)
        if timestamp_json is None:
            return None
        seconds: int | None = FieldAccess.get_field(timestamp_json, "seconds", FieldType.UINT48, errors, path)
        nanoseconds: int | None = FieldAccess.get_field(timestamp_json, "nanoseconds", FieldType.UINT32, errors, path)
        attoseconds: int | None = FieldAccess.get_field(timestamp_json, "attoseconds", FieldType.UINT32, errors, path)
        if "seconds" not in timestamp_json or "nanoseconds" not in timestamp_json:
            errors.append(f"field: {path} is missing required fields")
            return None
        if seconds is None or nanoseconds is None:
            return None
        return Timestamp(seconds=seconds, nanoseconds=nanoseconds, attoseconds=attoseconds)


class TimecodeFormat(BaseModel):
    frame_rate: Rational = Field()
    drop_frame: bool | None = Field(default=None)
    odd_field: bool | None = Field(default=None)

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str
    ) -> "TimecodeFormat | None":
        format_json: dict | None = _object_or_error(node, errors, path)
        if format_json is None:
            return None
        drop_frame: bool | None = FieldAccess.get_field(format_json, "dropFrame", FieldType.BOOLEAN, errors, path)
        odd_field: bool | None = FieldAccess.get_field(format_json, "oddField", FieldType.BOOLEAN, errors, path)
        if "frameRate" not in format_json:
            errors.append(f"field: {path} is missing required field: frameRate")
            return None
        frame_rate: Rational | None = Rational.parse(format_json["frameRate"], errors, f"{path}/frameRate")
        if frame_rate is None:
            return None
        return TimecodeFormat(frame_rate=frame_rate, drop_frame=drop_frame, odd_field=odd_field)


class Timecode(BaseModel):
    # Inclusive bounds per member
    RANGES: ClassVar[dict[str, tuple[int, int]]] = {
        "hours": (0, 23),
        "minutes": (0, 59),
        "seconds": (0, 59),
        "frames": (0, 119)}

    hours: int = Field()
    minutes: int = Field()
    seconds: int = Field()
    frames: int = Field()
    format: TimecodeFormat = Field()

    def __str__(self):
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}:{self.frames:02d}"

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str
    ) -> "Timecode | None":
        timecode_json: dict | None = _object_or_error(node, errors, path)
        if timecode_json is None:
            return None
        values: dict[str, int | None] = dict()
        for key, (minimum, maximum) in Timecode.RANGES.items():
            value: int | None = FieldAccess.get_field(timecode_json, key, FieldType.UINT32, errors, path)
            if value is not None and not minimum <= value <= maximum:
                errors.append(f"field: {path}/{key} is outside the expected range {minimum} - {maximum}.")
                value = None
            values[key] = value
        timecode_format: TimecodeFormat | None = None
        if "format" in timecode_json:
            timecode_format = TimecodeFormat.parse(timecode_json["format"], errors, f"{path}/format")
        if any(key not in timecode_json for key in [*Timecode.RANGES.keys(), "format"]):
            errors.append(f"field: {path} is missing required fields")
            return None
        if any(value is None for value in values.values()) or timecode_format is None:
            return None
        return Timecode(format=timecode_format, **values)


class Vector3(BaseModel):
    x: float = Field()
    y: float = Field()
    z: float = Field()

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str
    ) -> "Vector3 | None":
        vector_json: dict | None = _object_or_error(node, errors, path)
        if vector_json is None:
            return None
        x: float | None = FieldAccess.get_field(vector_json, "x", FieldType.DOUBLE, errors, path)
        y: float | None = FieldAccess.get_field(vector_json, "y", FieldType.DOUBLE, errors, path)
        z: float | None = FieldAccess.get_field(vector_json, "z", FieldType.DOUBLE, errors, path)
        if "x" not in vector_json or "y" not in vector_json or "z" not in vector_json:
            errors.append(f"field: {path} is missing required fields")
            return None
        if x is None or y is None or z is None:
            return None
        return Vector3(x=x, y=y, z=z)


class Rotator3(BaseModel):
    """
    Pan, tilt and roll in degrees.
    """
    pan: float = Field()
    tilt: float = Field()
    roll: float = Field()

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str
    ) -> "Rotator3 | None":
        rotator_json: dict | None = _object_or_error(node, errors, path)
        if rotator_json is None:
            return None
        pan: float | None = FieldAccess.get_field(rotator_json, "pan", FieldType.DOUBLE, errors, path)
        tilt: float | None = FieldAccess.get_field(rotator_json, "tilt", FieldType.DOUBLE, errors, path)
        roll: float | None = FieldAccess.get_field(rotator_json, "roll", FieldType.DOUBLE, errors, path)
        if "pan" not in rotator_json or "tilt" not in rotator_json or "roll" not in rotator_json:
            errors.append(f"field: {path} is missing required fields")
            return None
        if pan is None or tilt is None or roll is None:
            return None
        return Rotator3(pan=pan, tilt=tilt, roll=roll)


class Transform(BaseModel):
    translation: Vector3 = Field()
    rotation: Rotator3 = Field()
    scale: Vector3 | None = Field(default=None)
    id: str | None = Field(default=None)
    parent_id: str | None = Field(default=None)

    @staticmethod
    def parse(
        node: Any,
        errors: list[str],
        path: str
    ) -> "Transform | None":
        transform_json: dict | None = _object_or_error(node, errors, path)
        if transform_json is None:
            return None
        if "translation" not in transform_json or "rotation" not in transform_json:
            errors.append(f"field: {path} is missing required fields")
            return None
        translation: Vector3 | None = Vector3.parse(transform_json["translation"], errors, f"{path}/translation")
        rotation: Rotator3 | None = Rotator3.parse(transform_json["rotation"], errors, f"{path}/rotation")
        scale: Vector3 | None = None
        if "scale" in transform_json:
            scale = Vector3.parse(transform_json["scale"], errors, f"{path}/scale")
        transform_id: str | None = FieldAccess.get_field(transform_json, "id", FieldType.STRING, errors, path)
        parent_id: str | None = FieldAccess.get_field(transform_json, "parentId", FieldType.STRING, errors, path)
        if translation is None or rotation is None:
            return None
        return Transform(
            translation=translation,
            rotation=rotation,
            scale=scale,
            id=transform_id,
            parent_id=parent_id)
