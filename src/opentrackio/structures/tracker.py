from ..field_access import FieldAccess, FieldType
from pydantic import BaseModel, Field


class Tracker(BaseModel):
    # Static
    firmware_version: str | None = Field(default=None)
    make: str | None = Field(default=None)
    model: str | None = Field(default=None)
    serial_number: str | None = Field(default=None)

    # Per-sample
    notes: str | None = Field(default=None)
    recording: bool | None = Field(default=None)
    slate: str | None = Field(default=None)
    status: str | None = Field(default=None)

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "Tracker | None":
        static_present, static_json = FieldAccess.get_static_object(document, "tracker", errors, "static")
        standard_present: bool = "tracker" in document
        if not static_present and not standard_present:
            return None
        standard_json: dict | None = None
        if standard_present:
            standard_json = FieldAccess.get_object(document, "tracker", errors)
        if static_json is None and standard_json is None:
            return None

        tracker: Tracker = Tracker()
        if static_json is not None:
            path: str = "static/tracker"
            tracker.firmware_version = FieldAccess.get_field(
                static_json, "firmwareVersion", FieldType.STRING, errors, path)
            tracker.make = FieldAccess.get_field(static_json, "make", FieldType.STRING, errors, path)
            tracker.model = FieldAccess.get_field(static_json, "model", FieldType.STRING, errors, path)
            tracker.serial_number = FieldAccess.get_field(static_json, "serialNumber", FieldType.STRING, errors, path)
        if standard_json is not None:
            path = "tracker"
            tracker.notes = FieldAccess.get_field(standard_json, "notes", FieldType.STRING, errors, path)
            tracker.recording = FieldAccess.get_field(standard_json, "recording", FieldType.BOOLEAN, errors, path)
            tracker.slate = FieldAccess.get_field(standard_json, "slate", FieldType.STRING, errors, path)
            tracker.status = FieldAccess.get_field(standard_json, "status", FieldType.STRING, errors, path)
        return tracker
