"""
Configuration system with validation and environment awareness.
Based on Pydantic Settings; field geometry that used to be hard-coded in the
trial script lives here so other trial layouts can reuse the calculator.
"""
from pathlib import Path
import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal, Union

from irriflow.core.constants import (
    DEFAULT_BUCKET_SIZE_L, DEFAULT_ROW_SPACING_IN, DEFAULT_FIELD_LENGTH_FT,
    DEFAULT_NUM_ROWS_DIVERTED, DEFAULT_DATE_FORMAT, INCHES_PER_FOOT, SQFT_PER_ACRE,
)
from irriflow.core.exceptions import ConfigurationError


class FieldGeometryConfig(BaseSettings):
    """Field layout of an irrigation trial"""

    bucket_size_l: float = Field(
        DEFAULT_BUCKET_SIZE_L, gt=0, description="Bucket volume used for fill timings, liters"
    )
    row_spacing_in: float = Field(
        DEFAULT_ROW_SPACING_IN, gt=0, description="Furrow row spacing, inches"
    )
    field_length_ft: float = Field(
        DEFAULT_FIELD_LENGTH_FT, gt=0, description="Length of run, feet"
    )
    # Recorded with the trial; none of the conversions use it
    num_rows_diverted: int = Field(
        DEFAULT_NUM_ROWS_DIVERTED, ge=1, description="Number of rows diverted into the flume"
    )

    model_config = SettingsConfigDict(env_prefix="IRRIFLOW_GEOMETRY_", case_sensitive=False)

    @property
    def acreage_row(self) -> float:
        """Acreage of one wet row plus one dry row"""
        return (self.row_spacing_in * 2 / INCHES_PER_FOOT) * self.field_length_ft / SQFT_PER_ACRE


class IOConfig(BaseSettings):
    """Configuration for reading and writing observation tables"""

    date_format: str = Field(DEFAULT_DATE_FORMAT, description="strptime format of the date column")
    float_format: Optional[str] = Field(None, description="Float format for the output CSV, e.g. '%.6g'")
    drop_empty_columns: bool = Field(True, description="Drop columns that are missing in every row")

    model_config = SettingsConfigDict(env_prefix="IRRIFLOW_IO_", case_sensitive=False)


class LoggingConfig(BaseSettings):
    """Configuration for logging"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    model_config = SettingsConfigDict(env_prefix="IRRIFLOW_LOGGING_", case_sensitive=False)


class IrriflowConfig(BaseSettings):
    """Main configuration for irriflow"""

    project_name: str = "irriflow"
    trial_name: Optional[str] = Field(None, description="Free-text label of the trial")

    geometry: FieldGeometryConfig = Field(default_factory=FieldGeometryConfig)
    io: IOConfig = Field(default_factory=IOConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="IRRIFLOW_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "IrriflowConfig":
        """Load configuration from YAML file"""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}

        if not isinstance(yaml_config, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {yaml_path}")

        return cls(**yaml_config)

    def to_yaml(self, yaml_path: Union[str, Path]):
        """Save configuration to YAML file"""
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, default_flow_style=False)


# Global configuration instance
_config: Optional[IrriflowConfig] = None


def get_config(config_path: Optional[Path] = None) -> IrriflowConfig:
    """Get or create configuration instance (singleton pattern)"""
    global _config

    if _config is None:
        if config_path and Path(config_path).exists():
            _config = IrriflowConfig.from_yaml(config_path)
        else:
            # Try to load from environment
            _config = IrriflowConfig()

    return _config


def set_config(config: Optional[IrriflowConfig]):
    """Set configuration (useful for testing)"""
    global _config
    _config = config
