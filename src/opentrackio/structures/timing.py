from ..field_access import FieldAccess, FieldType, Patterns
from .types import Rational, Timecode, Timestamp
from enum import StrEnum
from pydantic import BaseModel, Field
from typing import Final


class TimingMode(StrEnum):
    EXTERNAL = "external"
    INTERNAL = "internal"


class SynchronizationSource(StrEnum):
    GEN_LOCK = "genlock"
    VIDEO_IN = "videoIn"
    PTP = "ptp"
    NTP = "ntp"


SYNCHRONIZATION_PATH: Final[str] = "timing/synchronization"


class SynchronizationOffsets(BaseModel):
    """
    Offsets in seconds between the synchronization source and the respective data.
    """
    translation: float | None = Field(default=None)
    rotation: float | None = Field(default=None)
    lens_encoders: float | None = Field(default=None)

    @staticmethod
    def from_members(
        translation: float | None,
        rotation: float | None,
        lens_encoders: float | None
    ) -> "SynchronizationOffsets | None":
        if translation is None and rotation is None and lens_encoders is None:
            return None
        return SynchronizationOffsets(translation=translation, rotation=rotation, lens_encoders=lens_encoders)


class SynchronizationPtp(BaseModel):
    domain: int | None = Field(default=None)
    offset: float | None = Field(default=None)
    master: str | None = Field(default=None)  # MAC address of the PTP leader

    @staticmethod
    def from_members(
        domain: int | None,
        offset: float | None,
        master: str | None
    ) -> "SynchronizationPtp | None":
        if domain is None and offset is None and master is None:
            return None
        return SynchronizationPtp(domain=domain, offset=offset, master=master)


class Synchronization(BaseModel):
    frequency: Rational = Field()
    locked: bool = Field()
    source: SynchronizationSource = Field()
    offsets: SynchronizationOffsets | None = Field(default=None)
    present: bool | None = Field(default=None)
    ptp: SynchronizationPtp | None = Field(default=None)

    @staticmethod
    def parse(
        node: dict,
        errors: list[str]
    ) -> "Synchronization | None":
        """
        :param node: The synchronization object itself (not the sample document)
        """
        if "frequency" not in node or "locked" not in node or "source" not in node:
            errors.append(f"field: {SYNCHRONIZATION_PATH} is missing required fields")
            return None

        frequency: Rational | None = Rational.parse(node["frequency"], errors, f"{SYNCHRONIZATION_PATH}/frequency")
        if frequency is None:
            return None

        locked: bool | None = FieldAccess.get_field(node, "locked", FieldType.BOOLEAN, errors, SYNCHRONIZATION_PATH)
        if locked is None:
            return None

        source_str: str | None = FieldAccess.get_field(node, "source", FieldType.STRING, errors, SYNCHRONIZATION_PATH)
        if source_str is None:
            return None
        if source_str not in [source.value for source in SynchronizationSource]:
            errors.append(f"field: {SYNCHRONIZATION_PATH}/source isn't a valid enumeration")
            return None

        synchronization: Synchronization = Synchronization(
            frequency=frequency,
            locked=locked,
            source=SynchronizationSource(source_str))

        offsets_json: dict | None = FieldAccess.get_object(node, "offsets", errors, SYNCHRONIZATION_PATH)
        if offsets_json is not None:
            offsets_path: str = f"{SYNCHRONIZATION_PATH}/offsets"
            synchronization.offsets = SynchronizationOffsets.from_members(
                translation=FieldAccess.get_field(offsets_json, "translation", FieldType.DOUBLE, errors, offsets_path),
                rotation=FieldAccess.get_field(offsets_json, "rotation", FieldType.DOUBLE, errors, offsets_path),
                lens_encoders=FieldAccess.get_field(
                    offsets_json, "lensEncoders", FieldType.DOUBLE, errors, offsets_path))

        synchronization.present = FieldAccess.get_field(
            node, "present", FieldType.BOOLEAN, errors, SYNCHRONIZATION_PATH)

        ptp_json: dict | None = FieldAccess.get_object(node, "ptp", errors, SYNCHRONIZATION_PATH)
        if ptp_json is not None:
            ptp_path: str = f"{SYNCHRONIZATION_PATH}/ptp"
            synchronization.ptp = SynchronizationPtp.from_members(
                domain=FieldAccess.get_field(ptp_json, "domain", FieldType.UINT16, errors, ptp_path),
                offset=FieldAccess.get_field(ptp_json, "offset", FieldType.DOUBLE, errors, ptp_path),
                master=FieldAccess.get_pattern_field(ptp_json, "master", Patterns.MAC_ADDRESS, errors, ptp_path))

        return synchronization


class Timing(BaseModel):
    frame_rate: Rational | None = Field(default=None)
    mode: TimingMode | None = Field(default=None)
    recorded_timestamp: Timestamp | None = Field(default=None)
    sample_timestamp: Timestamp | None = Field(default=None)
    sequence_number: int | None = Field(default=None)
    synchronization: Synchronization | None = Field(default=None)
    timecode: Timecode | None = Field(default=None)

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "Timing | None":
        if "timing" not in document:
            return None
        timing_json: dict | None = FieldAccess.get_object(document, "timing", errors)
        if timing_json is None:
            return None

        timing: Timing = Timing()
        if "frameRate" in timing_json:
            timing.frame_rate = Rational.parse(timing_json["frameRate"], errors, "timing/frameRate")

        mode_str: str | None = FieldAccess.get_field(timing_json, "mode", FieldType.STRING, errors, "timing")
        if mode_str is not None:
            if mode_str in [mode.value for mode in TimingMode]:
                timing.mode = TimingMode(mode_str)
            else:
                errors.append("field: timing/mode has an invalid string value.")

        if "recordedTimestamp" in timing_json:
            timing.recorded_timestamp = Timestamp.parse(
                timing_json["recordedTimestamp"], errors, "timing/recordedTimestamp")
        if "sampleTimestamp" in timing_json:
            timing.sample_timestamp = Timestamp.parse(
                timing_json["sampleTimestamp"], errors, "timing/sampleTimestamp")

        timing.sequence_number = FieldAccess.get_field(
            timing_json, "sequenceNumber", FieldType.UINT16, errors, "timing")

        synchronization_json: dict | None = FieldAccess.get_object(timing_json, "synchronization", errors, "timing")
        if synchronization_json is not None:
            timing.synchronization = Synchronization.parse(synchronization_json, errors)

        if "timecode" in timing_json:
            timing.timecode = Timecode.parse(timing_json["timecode"], errors, "timing/timecode")

        return timing
