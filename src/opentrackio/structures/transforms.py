from .types import Transform
from pydantic import BaseModel, Field


class Transforms(BaseModel):
    """
    Chain of transforms from the stage origin to the camera.
    """
    transforms: list[Transform] = Field(default_factory=list)

    @staticmethod
    def parse(
        document: dict,
        errors: list[str]
    ) -> "Transforms | None":
        if "transforms" not in document:
            return None
        if not isinstance(document["transforms"], list):
            errors.append("Transforms is not an array.")
            return None

        transforms: Transforms = Transforms()
        for index, transform_json in enumerate(document["transforms"]):
            # Transform.parse reports its own problems, rejected elements are left out
            transform: Transform | None = Transform.parse(transform_json, errors, f"transforms/{index}")
            if transform is not None:
                transforms.transforms.append(transform)
        return transforms
