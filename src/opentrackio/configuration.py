from .structures import EntityLabel, Sample
from src.common.exceptions import OpenTrackIOConfigurationError
from enum import StrEnum
import hjson
import logging
from pydantic import BaseModel, Field, ValidationError
from typing import Final


class LogLevelLabel(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


LOG_LEVEL_LABEL_TO_INT: Final[dict[LogLevelLabel, int]] = {
    LogLevelLabel.DEBUG: logging.DEBUG,
    LogLevelLabel.INFO: logging.INFO,
    LogLevelLabel.WARNING: logging.WARNING,
    LogLevelLabel.ERROR: logging.ERROR,
    LogLevelLabel.CRITICAL: logging.CRITICAL}


class ValidatorConfiguration(BaseModel):
    """
    Top-level schema for validator initialization data
    """
    log_level: LogLevelLabel = Field(default=LogLevelLabel.INFO)
    entities: list[EntityLabel] = Field(default_factory=Sample.entity_labels)
    fail_on_diagnostics: bool = Field(default=True)

    def log_level_int(self) -> int:
        return LOG_LEVEL_LABEL_TO_INT[self.log_level]

    @staticmethod
    def from_file(filepath: str) -> "ValidatorConfiguration":
        try:
            with open(filepath, 'r', encoding='utf-8') as infile:
                file_contents: str = infile.read()
        except OSError as e:
            raise OpenTrackIOConfigurationError(f"Failed to read configuration file {filepath}: {str(e)}") from None
        return ValidatorConfiguration.from_str(file_contents)

    @staticmethod
    def from_str(file_contents: str) -> "ValidatorConfiguration":
        try:
            configuration_dict = hjson.loads(file_contents)
        except hjson.HjsonDecodeError as e:
            raise OpenTrackIOConfigurationError(f"Configuration could not be decoded: {str(e)}") from None
        if not isinstance(configuration_dict, dict):
            raise OpenTrackIOConfigurationError("Configuration is expected to be an object.")
        try:
            return ValidatorConfiguration(**configuration_dict)
        except ValidationError as e:
            raise OpenTrackIOConfigurationError(f"Configuration was ill-formed: {str(e)}") from None
