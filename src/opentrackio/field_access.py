from enum import StrEnum
import re
import sys
from typing import Any, Final


class FieldType(StrEnum):
    """
    Semantic type of a destination field.
    The value doubles as the type label reported in diagnostics.
    """
    STRING = "string"
    BOOLEAN = "bool"
    DOUBLE = "double"
    INT32 = "int32"
    INT64 = "int64"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT48 = "uint48"
    OBJECT = "object"
    ARRAY = "array"


# Inclusive bounds of each integer width
INTEGER_RANGES: Final[dict[FieldType, tuple[int, int]]] = {
    FieldType.INT32: (-(2 ** 31), 2 ** 31 - 1),
    FieldType.INT64: (-(2 ** 63), 2 ** 63 - 1),
    FieldType.UINT16: (0, 2 ** 16 - 1),
    FieldType.UINT32: (0, 2 ** 32 - 1),
    FieldType.UINT48: (0, 2 ** 48 - 1)}


class ArrayPolicy(StrEnum):
    ABORT = "abort"  # One bad element invalidates the whole array
    SKIP = "skip"  # Bad elements are reported and dropped individually


class Patterns:
    URN_UUID: Final[re.Pattern] = re.compile(
        r"^urn:uuid:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")
    SEMANTIC_VERSION: Final[re.Pattern] = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+$")
    MAC_ADDRESS: Final[re.Pattern] = re.compile(r"^([A-F0-9]{2}:){5}[A-F0-9]{2}$")


class FieldAccess:
    """
    A "class" to group the typed field extractors every entity parser is built from.
    The class itself is not meant to be instantiated.

    None of these functions raise for malformed input. Problems are appended to the
    caller-supplied errors list, and the affected value is returned as None.
    An absent key is never an error at this level.
    """

    def __init__(self):
        raise RuntimeError(f"{__class__.__name__} is not meant to be instantiated.")

    @staticmethod
    def label(
        path: str | None,
        key: str
    ) -> str:
        if not path:
            return key
        return f"{path}/{key}"

    @staticmethod
    def is_type(
        value: Any,
        field_type: FieldType
    ) -> bool:
        # bool is a subclass of int, so it is excluded explicitly from the numeric types
        if field_type == FieldType.STRING:
            return isinstance(value, str)
        elif field_type == FieldType.BOOLEAN:
            return isinstance(value, bool)
        elif field_type == FieldType.DOUBLE:
            if isinstance(value, float):
                return True
            # Integers beyond double range cannot be converted
            return isinstance(value, int) and not isinstance(value, bool) and abs(value) <= sys.float_info.max
        elif field_type in INTEGER_RANGES:
            if not isinstance(value, int) or isinstance(value, bool):
                return False
            minimum, maximum = INTEGER_RANGES[field_type]
            return minimum <= value <= maximum
        elif field_type == FieldType.OBJECT:
            return isinstance(value, dict)
        elif field_type == FieldType.ARRAY:
            return isinstance(value, list)
        raise ValueError(f"Unhandled field type {field_type}.")

    @staticmethod
    def get_field(
        container: dict,
        key: str,
        field_type: FieldType,
        errors: list[str],
        path: str | None = None
    ) -> Any | None:
        """
        :param container: Object node to read from
        :param key: Name of the field within the container
        :param field_type: Expected semantic type, including integer width
        :param errors: Diagnostics sink
        :param path: Location of the container, used to prefix the field name in diagnostics
        :return: The value if present and well-typed, otherwise None
        """
        if key not in container:
            return None
        value: Any = container[key]
        if not FieldAccess.is_type(value, field_type):
            errors.append(f"field: {FieldAccess.label(path, key)} isn't of type: {field_type}")
            return None
        if field_type == FieldType.DOUBLE:
            return float(value)
        return value

    @staticmethod
    def get_pattern_field(
        container: dict,
        key: str,
        pattern: re.Pattern,
        errors: list[str],
        path: str | None = None
    ) -> str | None:
        """
        As get_field for strings, additionally requiring the entire string to match pattern.
        """
        value: str | None = FieldAccess.get_field(
            container=container,
            key=key,
            field_type=FieldType.STRING,
            errors=errors,
            path=path)
        if value is None:
            return None
        if pattern.fullmatch(value) is None:
            errors.append(f"field: {FieldAccess.label(path, key)} doesn't match required pattern")
            return None
        return value

    @staticmethod
    def get_object(
        container: dict,
        key: str,
        errors: list[str],
        path: str | None = None
    ) -> dict | None:
        return FieldAccess.get_field(
            container=container,
            key=key,
            field_type=FieldType.OBJECT,
            errors=errors,
            path=path)

    @staticmethod
    def get_array(
        container: dict,
        key: str,
        element_type: FieldType,
        errors: list[str],
        path: str | None = None,
        policy: ArrayPolicy = ArrayPolicy.ABORT,
        pattern: re.Pattern | None = None
    ) -> list | None:
        """
        :param container: Object node to read from
        :param key: Name of the array field within the container
        :param element_type: Expected semantic type of every element
        :param errors: Diagnostics sink
        :param path: Location of the container, used to prefix the field name in diagnostics
        :param policy:
            ArrayPolicy.ABORT -> the first bad element is reported once and the whole array is discarded
            ArrayPolicy.SKIP -> every bad element is reported and dropped, the remaining elements are kept
        :param pattern: If supplied, string elements must additionally match it in full
        :return: The ordered elements, or None if the array is absent or was discarded
        """
        elements: list | None = FieldAccess.get_field(
            container=container,
            key=key,
            field_type=FieldType.ARRAY,
            errors=errors,
            path=path)
        if elements is None:
            return None
        label: str = FieldAccess.label(path, key)
        output: list = list()
        for element in elements:
            problem: str | None = None
            if not FieldAccess.is_type(element, element_type):
                problem = f"isn't of type: {element_type}"
            elif pattern is not None and pattern.fullmatch(element) is None:
                problem = "doesn't match required pattern"
            if problem is not None:
                if policy == ArrayPolicy.ABORT:
                    errors.append(f"field: {label} value {problem}")
                    return None
                errors.append(f"field: {label}/element {problem}")
                continue
            if element_type == FieldType.DOUBLE:
                element = float(element)
            output.append(element)
        return output

    @staticmethod
    def get_static_object(
        document: dict,
        key: str,
        errors: list[str],
        path: str | None = None
    ) -> tuple[bool, dict | None]:
        """
        Locates a group under the document's "static" subtree.
        A "static" node that is not an object is treated as holding no groups.
        :param path: Prefix for the group name in diagnostics, bare by default
        :return: (whether the key is present, the object if it is one)
        """
        static: Any = document.get("static")
        if not isinstance(static, dict) or key not in static:
            return False, None
        return True, FieldAccess.get_object(
            container=static,
            key=key,
            errors=errors,
            path=path)
