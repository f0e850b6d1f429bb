from ..field_access import ArrayPolicy, FieldAccess, FieldType
from pydantic import BaseModel, Field


class Distortion(BaseModel):
    """
    Brown-Conrady style coefficients. Used for both distortion and undistortion.
    """
    radial: list[float] = Field()  # k1, k2, k3 ...
    tangential: list[float] | None = Field(default=None)  # p1, p2 ...

    @staticmethod
    def from_members(
        radial: list[float] | None,
        tangential: list[float] | None
    ) -> "Distortion | None":
        # Tangential coefficients are meaningless without radial ones
        if radial is None:
            return None
        return Distortion(radial=radial, tangential=tangential)


class ShiftXY(BaseModel):
    """
    Shift of the optical center, in millimeters. Used for both distortion and perspective shift.
    """
    x: float = Field()
    y: float = Field()

    @staticmethod
    def from_members(
        x: float | None,
        y: float | None
    ) -> "ShiftXY | None":
        if x is None or y is None:
            return None
        return ShiftXY(x=x, y=y)


class EntrancePupilOffset(BaseModel):
    num: int = Field()
    denom: int = Field()

    @staticmethod
    def from_members(
        num: int | None,
        denom: int | None
    ) -> "EntrancePupilOffset | None":
        if num is None or denom is None:
            return None
        return EntrancePupilOffset(num=num, denom=denom)


class ExposureFalloff(BaseModel):
    a1: float = Field()
    a2: float | None = Field(default=None)
    a3: float | None = Field(default=None)

    @staticmethod
    def from_members(
        a1: float | None,
        a2: float | None,
        a3: float | None
    ) -> "ExposureFalloff | None":
        if a1 is None:
            return None
        return ExposureFalloff(a1=a1, a2=a2, a3=a3)


class Encoders(BaseModel):
    """
    Normalized (0..1) focus, iris and zoom encoder positions.
    """
    focus: float | None = Field(default=None)
    iris: float | None = Field(default=None)
    zoom: float | None = Field(default=None)

    @staticmethod
    def from_members(
        focus: float | None,
        iris: float | None,
        zoom: float | None
    ) -> "Encoders | None":
        if focus is None and iris is None and zoom is None:
            return None
        return Encoders(focus=focus, iris=iris, zoom=zoom)


class RawEncoders(BaseModel):
    focus: int | None = Field(default=None)
    iris: int | None = Field(default=None)
    zoom: int | None = Field(default=None)

    @staticmethod
    def from_members(
        focus: int | None,
        iris: int | None,
        zoom: int | None
    ) -> "RawEncoders | None":
        if focus is None and iris is None and zoom is None:
            return None
        return RawEncoders(focus=focus, iris=iris, zoom=zoom)


class Lens(BaseModel):
    """
    Static lens identity plus the per-sample lens state.
    """

    # Static
    firmware_version: str | None = Field(default=None)
    make: str | None = Field(default=None)
    model: str | None = Field(default=None)
    nominal_focal_length: float | None = Field(default=None)
    serial_number: str | None = Field(default=None)

    # Per-sample
    custom: list[float] | None = Field(default=None)
    distortion: Distortion | None = Field(default=None)
    distortion_overscan: float | None = Field(default=None)
    distortion_scale: float | None = Field(default=None)
    distortion_shift: ShiftXY | None = Field(default=None)
    encoders: Encoders | None = Field(default=None)
    entrance_pupil_offset: EntrancePupilOffset | None = Field(default=None)
    exposure_falloff: ExposureFalloff | None = Field(default=None)
    f_stop: float | None = Field(default=None)
    focal_length: float | None = Field(default=None)
    focus_distance: float | None = Field(default=None)
    perspective_shift: ShiftXY | None = Field(default=None)
    raw_encoders: RawEncoders | None = Field(default=None)
    t_stop: float | None = Field(default=None)
    undistortion: Distortion | None = Field(default=None)

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "Lens | None":
        static_present, static_json = FieldAccess.get_static_object(document, "lens", errors, "static")
        standard_present: bool = "lens" in document
        if not static_present and not standard_present:
            return None
        standard_json: dict | None = None
        if standard_present:
            standard_json = FieldAccess.get_object(document, "lens", errors)
        if static_json is None and standard_json is None:
            return None

        lens: Lens = Lens()
        if static_json is not None:
            Lens._parse_static(lens, static_json, errors)
        if standard_json is not None:
            Lens._parse_standard(lens, standard_json, errors)
        return lens

    @staticmethod
    def _parse_static(
        lens: "Lens",
        lens_json: dict,
        errors: list[str]
    ) -> None:
        path: str = "static/lens"
        lens.firmware_version = FieldAccess.get_field(lens_json, "firmwareVersion", FieldType.STRING, errors, path)
        lens.make = FieldAccess.get_field(lens_json, "make", FieldType.STRING, errors, path)
        lens.model = FieldAccess.get_field(lens_json, "model", FieldType.STRING, errors, path)
        lens.nominal_focal_length = FieldAccess.get_field(
            lens_json, "nominalFocalLength", FieldType.DOUBLE, errors, path)
        lens.serial_number = FieldAccess.get_field(lens_json, "serialNumber", FieldType.STRING, errors, path)

    @staticmethod
    def _parse_standard(
        lens: "Lens",
        lens_json: dict,
        errors: list[str]
    ) -> None:
        path: str = "lens"
        lens.custom = FieldAccess.get_array(lens_json, "custom", FieldType.DOUBLE, errors, path, ArrayPolicy.ABORT)
        lens.distortion = Lens._parse_distortion(lens_json, "distortion", errors)
        lens.distortion_overscan = FieldAccess.get_field(
            lens_json, "distortionOverscan", FieldType.DOUBLE, errors, path)
        lens.distortion_scale = FieldAccess.get_field(lens_json, "distortionScale", FieldType.DOUBLE, errors, path)
        lens.distortion_shift = Lens._parse_shift(lens_json, "distortionShift", errors)

        encoders_json: dict | None = FieldAccess.get_object(lens_json, "encoders", errors, path)
        if encoders_json is not None:
            encoders_path: str = f"{path}/encoders"
            lens.encoders = Encoders.from_members(
                focus=FieldAccess.get_field(encoders_json, "focus", FieldType.DOUBLE, errors, encoders_path),
                iris=FieldAccess.get_field(encoders_json, "iris", FieldType.DOUBLE, errors, encoders_path),
                zoom=FieldAccess.get_field(encoders_json, "zoom", FieldType.DOUBLE, errors, encoders_path))

        offset_json: dict | None = FieldAccess.get_object(lens_json, "entrancePupilOffset", errors, path)
        if offset_json is not None:
            offset_path: str = f"{path}/entrancePupilOffset"
            lens.entrance_pupil_offset = EntrancePupilOffset.from_members(
                num=FieldAccess.get_field(offset_json, "num", FieldType.INT64, errors, offset_path),
                denom=FieldAccess.get_field(offset_json, "denom", FieldType.INT64, errors, offset_path))
            if lens.entrance_pupil_offset is None:
                Lens._report_missing_required(offset_json, offset_path, ["num", "denom"], errors)

        falloff_json: dict | None = FieldAccess.get_object(lens_json, "exposureFalloff", errors, path)
        if falloff_json is not None:
            falloff_path: str = f"{path}/exposureFalloff"
            lens.exposure_falloff = ExposureFalloff.from_members(
                a1=FieldAccess.get_field(falloff_json, "a1", FieldType.DOUBLE, errors, falloff_path),
                a2=FieldAccess.get_field(falloff_json, "a2", FieldType.DOUBLE, errors, falloff_path),
                a3=FieldAccess.get_field(falloff_json, "a3", FieldType.DOUBLE, errors, falloff_path))
            if lens.exposure_falloff is None:
                Lens._report_missing_required(falloff_json, falloff_path, ["a1"], errors)

        lens.f_stop = FieldAccess.get_field(lens_json, "fStop", FieldType.DOUBLE, errors, path)
        lens.focal_length = FieldAccess.get_field(lens_json, "focalLength", FieldType.DOUBLE, errors, path)
        lens.focus_distance = FieldAccess.get_field(lens_json, "focusDistance", FieldType.DOUBLE, errors, path)
        lens.perspective_shift = Lens._parse_shift(lens_json, "perspectiveShift", errors)

        raw_encoders_json: dict | None = FieldAccess.get_object(lens_json, "rawEncoders", errors, path)
        if raw_encoders_json is not None:
            raw_path: str = f"{path}/rawEncoders"
            lens.raw_encoders = RawEncoders.from_members(
                focus=FieldAccess.get_field(raw_encoders_json, "focus", FieldType.UINT32, errors, raw_path),
                iris=FieldAccess.get_field(raw_encoders_json, "iris", FieldType.UINT32, errors, raw_path),
                zoom=FieldAccess.get_field(raw_encoders_json, "zoom", FieldType.UINT32, errors, raw_path))

        lens.t_stop = FieldAccess.get_field(lens_json, "tStop", FieldType.DOUBLE, errors, path)
        lens.undistortion = Lens._parse_distortion(lens_json, "undistortion", errors)

    @staticmethod
    def _parse_distortion(
        lens_json: dict,
        key: str,
        errors: list[str]
    ) -> Distortion | None:
        distortion_json: dict | None = FieldAccess.get_object(lens_json, key, errors, "lens")
        if distortion_json is None:
            return None
        path: str = f"lens/{key}"
        distortion: Distortion | None = Distortion.from_members(
            radial=FieldAccess.get_array(distortion_json, "radial", FieldType.DOUBLE, errors, path, ArrayPolicy.ABORT),
            tangential=FieldAccess.get_array(
                distortion_json, "tangential", FieldType.DOUBLE, errors, path, ArrayPolicy.ABORT))
        if distortion is None:
            Lens._report_missing_required(distortion_json, path, ["radial"], errors)
        return distortion

    @staticmethod
    def _parse_shift(
        lens_json: dict,
        key: str,
        errors: list[str]
    ) -> ShiftXY | None:
        shift_json: dict | None = FieldAccess.get_object(lens_json, key, errors, "lens")
        if shift_json is None:
            return None
        path: str = f"lens/{key}"
        shift: ShiftXY | None = ShiftXY.from_members(
            x=FieldAccess.get_field(shift_json, "x", FieldType.DOUBLE, errors, path),
            y=FieldAccess.get_field(shift_json, "y", FieldType.DOUBLE, errors, path))
        if shift is None:
            Lens._report_missing_required(shift_json, path, ["x", "y"], errors)
        return shift

    @staticmethod
    def _report_missing_required(
        group_json: dict,
        path: str,
        required_keys: list[str],
        errors: list[str]
    ) -> None:
        # Members that are present but malformed have already been reported
        if any(key not in group_json for key in required_keys):
            errors.append(f"field: {path} is missing required fields")
