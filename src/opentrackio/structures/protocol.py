from ..field_access import FieldAccess, FieldType, Patterns
from pydantic import BaseModel, Field


class Protocol(BaseModel):
    name: str = Field()
    version: str = Field()  # major.minor.patch, not checked for compatibility

    def version_parts(self) -> tuple[int, int, int]:
        major, minor, patch = self.version.split(".")
        return int(major), int(minor), int(patch)

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "Protocol | None":
        if "protocol" not in document:
            return None
        protocol_json: dict | None = FieldAccess.get_object(document, "protocol", errors)
        if protocol_json is None:
            return None

        # Both members are always evaluated and reported
        for key in ["name", "version"]:
            if key not in protocol_json:
                errors.append(f"field: protocol is missing required field: {key}")
        name: str | None = FieldAccess.get_field(protocol_json, "name", FieldType.STRING, errors, "protocol")
        version: str | None = FieldAccess.get_pattern_field(
            protocol_json, "version", Patterns.SEMANTIC_VERSION, errors, "protocol")
        if name is None or version is None:
            return None

        return Protocol(name=name, version=version)
