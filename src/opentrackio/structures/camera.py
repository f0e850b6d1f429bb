from ..field_access import FieldAccess, FieldType, Patterns
from .types import Dimensions, Rational
from pydantic import BaseModel, Field
from typing import Final


SHUTTER_ANGLE_MINIMUM: Final[int] = 1
SHUTTER_ANGLE_MAXIMUM: Final[int] = 360000  # thousandths of a degree


class Camera(BaseModel):
    """
    Static properties of the camera body.
    """
    active_sensor_physical_dimensions: Dimensions | None = Field(default=None)  # millimeters
    active_sensor_resolution: Dimensions | None = Field(default=None)  # pixels
    anamorphic_squeeze: Rational | None = Field(default=None)
    firmware_version: str | None = Field(default=None)
    label: str | None = Field(default=None)
    make: str | None = Field(default=None)
    model: str | None = Field(default=None)
    serial_number: str | None = Field(default=None)
    capture_frame_rate: Rational | None = Field(default=None)
    fdl_link: str | None = Field(default=None)
    iso_speed: int | None = Field(default=None)
    shutter_angle: int | None = Field(default=None)

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "Camera | None":
        present, camera_json = FieldAccess.get_static_object(document, "camera", errors)
        if not present or camera_json is None:
            return None

        camera: Camera = Camera()
        if "activeSensorPhysicalDimensions" in camera_json:
            camera.active_sensor_physical_dimensions = Dimensions.parse(
                camera_json["activeSensorPhysicalDimensions"], errors, "camera/activeSensorPhysicalDimensions")
        if "activeSensorResolution" in camera_json:
            camera.active_sensor_resolution = Dimensions.parse(
                camera_json["activeSensorResolution"], errors, "camera/activeSensorResolution",
                value_type=FieldType.UINT32)
        if "anamorphicSqueeze" in camera_json:
            camera.anamorphic_squeeze = Rational.parse(
                camera_json["anamorphicSqueeze"], errors, "camera/anamorphicSqueeze")

        camera.firmware_version = FieldAccess.get_field(camera_json, "firmwareVersion", FieldType.STRING, errors)
        camera.label = FieldAccess.get_field(camera_json, "label", FieldType.STRING, errors)
        camera.make = FieldAccess.get_field(camera_json, "make", FieldType.STRING, errors)
        camera.model = FieldAccess.get_field(camera_json, "model", FieldType.STRING, errors)
        camera.serial_number = FieldAccess.get_field(camera_json, "serialNumber", FieldType.STRING, errors)

        if "captureFrameRate" in camera_json:
            camera.capture_frame_rate = Rational.parse(
                camera_json["captureFrameRate"], errors, "camera/captureFrameRate")

        camera.fdl_link = FieldAccess.get_pattern_field(camera_json, "fdlLink", Patterns.URN_UUID, errors)
        camera.iso_speed = FieldAccess.get_field(camera_json, "isoSpeed", FieldType.UINT32, errors)

        # Out of range only retracts the shutter angle itself, the rest of the camera stays valid
        shutter_angle: int | None = FieldAccess.get_field(camera_json, "shutterAngle", FieldType.INT64, errors)
        if shutter_angle is not None and not SHUTTER_ANGLE_MINIMUM <= shutter_angle <= SHUTTER_ANGLE_MAXIMUM:
            errors.append(
                f"field: shutterAngle is outside the expected range "
                f"{SHUTTER_ANGLE_MINIMUM} - {SHUTTER_ANGLE_MAXIMUM}.")
            shutter_angle = None
        camera.shutter_angle = shutter_angle

        return camera
