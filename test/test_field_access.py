from src.opentrackio import \
    ArrayPolicy, \
    FieldAccess, \
    FieldType, \
    Patterns
from typing import Final
from unittest import TestCase


VALID_UUID: Final[str] = "urn:uuid:0123abcd-0000-4000-8000-00000000ffff"


class TestFieldAccess(TestCase):

    def test_not_instantiable(self):
        with self.assertRaises(RuntimeError):
            FieldAccess()

    def test_absent_is_silent(self):
        errors: list[str] = list()
        self.assertIsNone(FieldAccess.get_field({}, "label", FieldType.STRING, errors))
        self.assertIsNone(FieldAccess.get_pattern_field({}, "sampleId", Patterns.URN_UUID, errors))
        self.assertIsNone(FieldAccess.get_array({}, "custom", FieldType.DOUBLE, errors))
        self.assertIsNone(FieldAccess.get_object({}, "offsets", errors))
        self.assertEqual(errors, [])

    def test_type_mismatch(self):
        errors: list[str] = list()
        self.assertIsNone(FieldAccess.get_field({"label": 5}, "label", FieldType.STRING, errors))
        self.assertEqual(errors, ["field: label isn't of type: string"])

    def test_type_mismatch_with_path(self):
        errors: list[str] = list()
        value = FieldAccess.get_field({"recording": "yes"}, "recording", FieldType.BOOLEAN, errors, "tracker")
        self.assertIsNone(value)
        self.assertEqual(errors, ["field: tracker/recording isn't of type: bool"])

    def test_well_typed(self):
        errors: list[str] = list()
        self.assertEqual(FieldAccess.get_field({"label": "A"}, "label", FieldType.STRING, errors), "A")
        self.assertIs(FieldAccess.get_field({"locked": False}, "locked", FieldType.BOOLEAN, errors), False)
        self.assertEqual(FieldAccess.get_field({"n": -7}, "n", FieldType.INT32, errors), -7)
        self.assertEqual(errors, [])

    def test_uint16_bounds(self):
        errors: list[str] = list()
        self.assertEqual(FieldAccess.get_field({"n": 0}, "n", FieldType.UINT16, errors), 0)
        self.assertEqual(FieldAccess.get_field({"n": 65535}, "n", FieldType.UINT16, errors), 65535)
        self.assertEqual(errors, [])
        self.assertIsNone(FieldAccess.get_field({"n": 70000}, "n", FieldType.UINT16, errors))
        self.assertIsNone(FieldAccess.get_field({"n": -1}, "n", FieldType.UINT16, errors))
        self.assertEqual(len(errors), 2)

    def test_integer_widths(self):
        self.assertTrue(FieldAccess.is_type(2 ** 32 - 1, FieldType.UINT32))
        self.assertFalse(FieldAccess.is_type(2 ** 32, FieldType.UINT32))
        self.assertTrue(FieldAccess.is_type(2 ** 48 - 1, FieldType.UINT48))
        self.assertFalse(FieldAccess.is_type(2 ** 48, FieldType.UINT48))
        self.assertTrue(FieldAccess.is_type(-(2 ** 63), FieldType.INT64))
        self.assertFalse(FieldAccess.is_type(2 ** 63, FieldType.INT64))
        self.assertFalse(FieldAccess.is_type(2 ** 31, FieldType.INT32))

    def test_integer_rejects_non_integral(self):
        self.assertFalse(FieldAccess.is_type(5.5, FieldType.UINT32))
        self.assertFalse(FieldAccess.is_type(5.0, FieldType.UINT32))
        self.assertFalse(FieldAccess.is_type("5", FieldType.UINT32))
        self.assertFalse(FieldAccess.is_type(True, FieldType.UINT32))

    def test_double(self):
        errors: list[str] = list()
        value = FieldAccess.get_field({"x": 3}, "x", FieldType.DOUBLE, errors)
        self.assertIsInstance(value, float)
        self.assertEqual(value, 3.0)
        self.assertIsNone(FieldAccess.get_field({"x": True}, "x", FieldType.DOUBLE, errors))
        self.assertIsNone(FieldAccess.get_field({"x": "3.0"}, "x", FieldType.DOUBLE, errors))
        self.assertEqual(errors, ["field: x isn't of type: double"] * 2)

    def test_pattern_urn_uuid(self):
        errors: list[str] = list()
        self.assertEqual(
            FieldAccess.get_pattern_field({"id": VALID_UUID}, "id", Patterns.URN_UUID, errors),
            VALID_UUID)
        self.assertEqual(errors, [])
        for invalid in [
            VALID_UUID.upper(),
            VALID_UUID + "\n",
            "x" + VALID_UUID,
            VALID_UUID[:-1],
            "not-a-uuid"
        ]:
            errors = list()
            self.assertIsNone(FieldAccess.get_pattern_field({"id": invalid}, "id", Patterns.URN_UUID, errors))
            self.assertEqual(errors, ["field: id doesn't match required pattern"])

    def test_pattern_type_mismatch_reports_type_only(self):
        errors: list[str] = list()
        self.assertIsNone(FieldAccess.get_pattern_field({"id": 12}, "id", Patterns.URN_UUID, errors))
        self.assertEqual(errors, ["field: id isn't of type: string"])

    def test_pattern_semantic_version(self):
        self.assertIsNotNone(Patterns.SEMANTIC_VERSION.fullmatch("1.0.0"))
        self.assertIsNotNone(Patterns.SEMANTIC_VERSION.fullmatch("10.22.333"))
        self.assertIsNone(Patterns.SEMANTIC_VERSION.fullmatch("1.0"))
        self.assertIsNone(Patterns.SEMANTIC_VERSION.fullmatch("1a0b0"))
        self.assertIsNone(Patterns.SEMANTIC_VERSION.fullmatch("v1.0.0"))

    def test_pattern_mac_address(self):
        self.assertIsNotNone(Patterns.MAC_ADDRESS.fullmatch("00:1A:2B:3C:4D:5E"))
        self.assertIsNone(Patterns.MAC_ADDRESS.fullmatch("00:1a:2b:3c:4d:5e"))
        self.assertIsNone(Patterns.MAC_ADDRESS.fullmatch("00:1A:2B:3C:4D"))
        self.assertIsNone(Patterns.MAC_ADDRESS.fullmatch("00-1A-2B-3C-4D-5E"))

    def test_array_abort(self):
        errors: list[str] = list()
        value = FieldAccess.get_array(
            {"custom": [1.0, "bad", 2.0]}, "custom", FieldType.DOUBLE, errors, "lens", ArrayPolicy.ABORT)
        self.assertIsNone(value)
        self.assertEqual(errors, ["field: lens/custom value isn't of type: double"])

    def test_array_abort_all_valid(self):
        errors: list[str] = list()
        value = FieldAccess.get_array({"custom": [1, 2.5]}, "custom", FieldType.DOUBLE, errors, "lens")
        self.assertEqual(value, [1.0, 2.5])
        self.assertEqual(errors, [])

    def test_array_skip(self):
        errors: list[str] = list()
        value = FieldAccess.get_array(
            {"ids": [VALID_UUID, "bad", 123, VALID_UUID]},
            "ids",
            FieldType.STRING,
            errors,
            policy=ArrayPolicy.SKIP,
            pattern=Patterns.URN_UUID)
        self.assertEqual(value, [VALID_UUID, VALID_UUID])
        self.assertEqual(errors, [
            "field: ids/element doesn't match required pattern",
            "field: ids/element isn't of type: string"])

    def test_array_wrong_container(self):
        errors: list[str] = list()
        self.assertIsNone(FieldAccess.get_array({"custom": 1.0}, "custom", FieldType.DOUBLE, errors, "lens"))
        self.assertEqual(errors, ["field: lens/custom isn't of type: array"])

    def test_object_wrong_container(self):
        errors: list[str] = list()
        self.assertIsNone(FieldAccess.get_object({"ptp": []}, "ptp", errors, "timing/synchronization"))
        self.assertEqual(errors, ["field: timing/synchronization/ptp isn't of type: object"])

    def test_static_object(self):
        errors: list[str] = list()
        self.assertEqual(FieldAccess.get_static_object({}, "camera", errors), (False, None))
        self.assertEqual(FieldAccess.get_static_object({"static": 5}, "camera", errors), (False, None))
        self.assertEqual(FieldAccess.get_static_object({"static": {}}, "camera", errors), (False, None))
        self.assertEqual(errors, [])
        self.assertEqual(
            FieldAccess.get_static_object({"static": {"camera": {"make": "A"}}}, "camera", errors),
            (True, {"make": "A"}))
        self.assertEqual(FieldAccess.get_static_object({"static": {"camera": 1}}, "camera", errors), (True, None))
        self.assertEqual(errors, ["field: camera isn't of type: object"])
        self.assertEqual(
            FieldAccess.get_static_object({"static": {"lens": []}}, "lens", errors, "static"),
            (True, None))
        self.assertEqual(errors[-1], "field: static/lens isn't of type: object")
