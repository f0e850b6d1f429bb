from .configuration import \
    LogLevelLabel, \
    ValidatorConfiguration
from .field_access import \
    ArrayPolicy, \
    FieldAccess, \
    FieldType, \
    Patterns
from .sample_loader import \
    SampleLoader
from .structures import \
    Camera, \
    Dimensions, \
    Distortion, \
    Duration, \
    Encoders, \
    EntityLabel, \
    EntrancePupilOffset, \
    ExposureFalloff, \
    GlobalStage, \
    Lens, \
    Protocol, \
    Rational, \
    RawEncoders, \
    RelatedSampleIds, \
    Rotator3, \
    Sample, \
    SampleId, \
    ShiftXY, \
    StreamId, \
    Synchronization, \
    SynchronizationOffsets, \
    SynchronizationPtp, \
    SynchronizationSource, \
    Timecode, \
    TimecodeFormat, \
    Timestamp, \
    Timing, \
    TimingMode, \
    Tracker, \
    Transform, \
    Transforms, \
    Vector3
