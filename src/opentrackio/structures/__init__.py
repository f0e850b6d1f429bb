from .camera import \
    Camera
from .duration import \
    Duration
from .global_stage import \
    GlobalStage
from .identifiers import \
    RelatedSampleIds, \
    SampleId, \
    StreamId
from .lens import \
    Distortion, \
    Encoders, \
    EntrancePupilOffset, \
    ExposureFalloff, \
    Lens, \
    RawEncoders, \
    ShiftXY
from .protocol import \
    Protocol
from .sample import \
    EntityLabel, \
    Sample
from .timing import \
    Synchronization, \
    SynchronizationOffsets, \
    SynchronizationPtp, \
    SynchronizationSource, \
    Timing, \
    TimingMode
from .tracker import \
    Tracker
from .transforms import \
    Transforms
from .types import \
    Dimensions, \
    Rational, \
    Rotator3, \
    Timecode, \
    TimecodeFormat, \
    Timestamp, \
    Transform, \
    Vector3
