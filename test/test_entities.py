from src.opentrackio import \
    Camera, \
    Duration, \
    GlobalStage, \
    Lens, \
    Protocol, \
    Rational, \
    RelatedSampleIds, \
    SampleId, \
    StreamId, \
    Timing, \
    Tracker, \
    Transforms
import itertools
from typing import Final
from unittest import TestCase


UUID_A: Final[str] = "urn:uuid:00000000-0000-0000-0000-000000000000"
UUID_B: Final[str] = "urn:uuid:b8d8c9e1-9f8a-4c3e-8a3f-1d2c3b4a5f6e"

GLOBAL_STAGE_JSON: Final[dict] = {
    "E": 100.0,
    "N": 200.0,
    "U": 300.0,
    "lat0": 51.5,
    "lon0": -0.12,
    "h0": 11.0}

ALL_PARSERS: Final[list] = [
    Camera.parse,
    Duration.parse,
    GlobalStage.parse,
    Lens.parse,
    Protocol.parse,
    RelatedSampleIds.parse,
    SampleId.parse,
    StreamId.parse,
    Timing.parse,
    Tracker.parse,
    Transforms.parse]


class TestAbsence(TestCase):

    def test_absence_is_silent(self):
        for document in [{}, {"static": {}}, {"unrelated": {"camera": {}}}, {"static": "camera"}]:
            for parser in ALL_PARSERS:
                errors: list[str] = list()
                self.assertIsNone(parser(document, errors))
                self.assertEqual(errors, [])


class TestDuration(TestCase):

    def test_numerator_and_denominator_are_independent(self):
        errors: list[str] = list()
        duration = Duration.parse({"static": {"duration": {"num": 10, "denom": 2}}}, errors)
        self.assertEqual(duration.rational, Rational(num=10, denom=2))
        self.assertEqual(errors, [])

    def test_missing_denominator(self):
        errors: list[str] = list()
        self.assertIsNone(Duration.parse({"static": {"duration": {"num": 10}}}, errors))
        self.assertEqual(errors, ["field: duration is missing required fields"])

    def test_wrong_type(self):
        errors: list[str] = list()
        self.assertIsNone(Duration.parse({"static": {"duration": {"num": 10, "denom": -2}}}, errors))
        self.assertEqual(errors, [
            "field: duration/denom isn't of type: uint32",
            "field: duration is missing required fields"])

    def test_not_object(self):
        errors: list[str] = list()
        self.assertIsNone(Duration.parse({"static": {"duration": 5}}, errors))
        self.assertEqual(errors, ["field: duration isn't of type: object"])

    def test_zero_denominator(self):
        errors: list[str] = list()
        self.assertIsNone(Duration.parse({"static": {"duration": {"num": 10, "denom": 0}}}, errors))
        self.assertEqual(errors, ["field: duration/denom must be greater than zero"])


class TestGlobalStage(TestCase):

    def test_complete(self):
        errors: list[str] = list()
        global_stage = GlobalStage.parse({"globalStage": GLOBAL_STAGE_JSON}, errors)
        self.assertEqual(global_stage, GlobalStage(e=100.0, n=200.0, u=300.0, lat0=51.5, lon0=-0.12, h0=11.0))
        self.assertEqual(errors, [])

    def test_integers_are_numbers(self):
        errors: list[str] = list()
        global_stage = GlobalStage.parse({"globalStage": {**GLOBAL_STAGE_JSON, "E": 1}}, errors)
        self.assertEqual(global_stage.e, 1.0)
        self.assertEqual(errors, [])

    def test_every_missing_subset(self):
        keys: list[str] = list(GLOBAL_STAGE_JSON.keys())
        for missing_count in range(1, len(keys) + 1):
            for missing in itertools.combinations(keys, missing_count):
                node: dict = {key: value for key, value in GLOBAL_STAGE_JSON.items() if key not in missing}
                errors: list[str] = list()
                self.assertIsNone(GlobalStage.parse({"globalStage": node}, errors))
                self.assertEqual(len(errors), 1)
                first_missing: str = [key for key in keys if key in missing][0]
                self.assertEqual(errors[0], f"field: globalStage is missing require field: {first_missing}")

    def test_not_a_number(self):
        errors: list[str] = list()
        self.assertIsNone(GlobalStage.parse({"globalStage": {**GLOBAL_STAGE_JSON, "lat0": "51.5"}}, errors))
        self.assertEqual(errors, ["field: globalStage/lat0 isn't a number"])

    def test_not_object(self):
        errors: list[str] = list()
        self.assertIsNone(GlobalStage.parse({"globalStage": [1, 2, 3]}, errors))
        self.assertEqual(errors, ["field: globalStage isn't of type: object"])


class TestProtocol(TestCase):

    def test_complete(self):
        errors: list[str] = list()
        protocol = Protocol.parse({"protocol": {"name": "OpenTrackIO", "version": "1.0.0"}}, errors)
        self.assertEqual(protocol, Protocol(name="OpenTrackIO", version="1.0.0"))
        self.assertEqual(protocol.version_parts(), (1, 0, 0))
        self.assertEqual(errors, [])

    def test_missing_name(self):
        errors: list[str] = list()
        self.assertIsNone(Protocol.parse({"protocol": {"version": "1.0.0"}}, errors))
        self.assertEqual(errors, ["field: protocol is missing required field: name"])

    def test_name_wrong_type(self):
        errors: list[str] = list()
        self.assertIsNone(Protocol.parse({"protocol": {"name": 1, "version": "1.0.0"}}, errors))
        self.assertEqual(errors, ["field: protocol/name isn't of type: string"])

    def test_malformed_version(self):
        errors: list[str] = list()
        self.assertIsNone(Protocol.parse({"protocol": {"name": "OpenTrackIO", "version": "1.0"}}, errors))
        self.assertEqual(errors, ["field: protocol/version doesn't match required pattern"])

    def test_missing_both(self):
        errors: list[str] = list()
        self.assertIsNone(Protocol.parse({"protocol": {}}, errors))
        self.assertEqual(errors, [
            "field: protocol is missing required field: name",
            "field: protocol is missing required field: version"])

    def test_not_object(self):
        errors: list[str] = list()
        self.assertIsNone(Protocol.parse({"protocol": "OpenTrackIO"}, errors))
        self.assertEqual(errors, ["field: protocol isn't of type: object"])


class TestIdentifiers(TestCase):

    def test_sample_id(self):
        errors: list[str] = list()
        sample_id = SampleId.parse({"sampleId": UUID_A}, errors)
        self.assertEqual(sample_id.value, UUID_A)
        self.assertEqual(str(sample_id), UUID_A)
        self.assertEqual(errors, [])

    def test_sample_id_malformed(self):
        errors: list[str] = list()
        self.assertIsNone(SampleId.parse({"sampleId": "not-a-uuid"}, errors))
        self.assertEqual(errors, ["field: sampleId doesn't match required pattern"])

    def test_stream_id(self):
        errors: list[str] = list()
        self.assertEqual(StreamId.parse({"streamId": UUID_B}, errors).value, UUID_B)
        self.assertIsNone(StreamId.parse({"streamId": 7}, errors))
        self.assertEqual(errors, ["field: streamId isn't of type: string"])

    def test_related_sample_ids_partial(self):
        errors: list[str] = list()
        related = RelatedSampleIds.parse({"relatedSampleIds": [UUID_B, "bad", 123]}, errors)
        self.assertIsNotNone(related)
        self.assertEqual(related.samples, [UUID_B])
        self.assertEqual(errors, [
            "field: relatedSampleIds/element doesn't match required pattern",
            "field: relatedSampleIds/element isn't of type: string"])

    def test_related_sample_ids_all_bad_is_present(self):
        errors: list[str] = list()
        related = RelatedSampleIds.parse({"relatedSampleIds": ["bad"]}, errors)
        self.assertEqual(related, RelatedSampleIds(samples=[]))
        self.assertEqual(len(errors), 1)

    def test_related_sample_ids_order(self):
        errors: list[str] = list()
        related = RelatedSampleIds.parse({"relatedSampleIds": [UUID_B, UUID_A]}, errors)
        self.assertEqual(related.samples, [UUID_B, UUID_A])

    def test_related_sample_ids_not_array(self):
        errors: list[str] = list()
        self.assertIsNone(RelatedSampleIds.parse({"relatedSampleIds": UUID_A}, errors))
        self.assertEqual(errors, ["field: relatedSampleIds isn't of type: array"])


class TestTracker(TestCase):

    def test_complete(self):
        errors: list[str] = list()
        tracker = Tracker.parse(
            {
                "static": {
                    "tracker": {
                        "firmwareVersion": "1.0",
                        "make": "TrackCo",
                        "model": "T1",
                        "serialNumber": "T-1"}},
                "tracker": {
                    "notes": "Example",
                    "recording": False,
                    "slate": "A101_A_4",
                    "status": "Optical Good"}
            },
            errors)
        self.assertEqual(errors, [])
        self.assertEqual(tracker, Tracker(
            firmware_version="1.0",
            make="TrackCo",
            model="T1",
            serial_number="T-1",
            notes="Example",
            recording=False,
            slate="A101_A_4",
            status="Optical Good"))

    def test_wrong_types(self):
        errors: list[str] = list()
        tracker = Tracker.parse({"tracker": {"recording": "yes", "slate": "A101"}}, errors)
        self.assertIsNone(tracker.recording)
        self.assertEqual(tracker.slate, "A101")
        self.assertEqual(errors, ["field: tracker/recording isn't of type: bool"])

    def test_static_not_object(self):
        errors: list[str] = list()
        tracker = Tracker.parse({"static": {"tracker": 5}, "tracker": {"slate": "A101"}}, errors)
        self.assertEqual(tracker, Tracker(slate="A101"))
        self.assertEqual(errors, ["field: static/tracker isn't of type: object"])


class TestTransforms(TestCase):

    def test_skips_malformed_elements(self):
        errors: list[str] = list()
        transforms = Transforms.parse(
            {
                "transforms": [
                    {
                        "translation": {"x": 1.0, "y": 2.0, "z": 3.0},
                        "rotation": {"pan": 0.0, "tilt": 0.0, "roll": 0.0},
                        "scale": {"x": 1.0, "y": 1.0, "z": 1.0},
                        "id": "Camera"},
                    {"translation": {"x": 1.0, "y": 2.0, "z": 3.0}},
                    "Stage"]
            },
            errors)
        self.assertEqual(len(transforms.transforms), 1)
        self.assertEqual(transforms.transforms[0].id, "Camera")
        self.assertEqual(transforms.transforms[0].scale.x, 1.0)
        self.assertEqual(errors, [
            "field: transforms/1 is missing required fields",
            "field: transforms/2 isn't of type: object"])

    def test_empty(self):
        errors: list[str] = list()
        self.assertEqual(Transforms.parse({"transforms": []}, errors), Transforms())
        self.assertEqual(errors, [])

    def test_not_array(self):
        errors: list[str] = list()
        self.assertIsNone(Transforms.parse({"transforms": {}}, errors))
        self.assertEqual(errors, ["Transforms is not an array."])
