"""Configuration data models."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProbeConfig(BaseModel):
    """External probe configuration."""

    ffprobe_bin: str = Field(default="ffprobe", description="ffprobe executable name or path")

    @field_validator("ffprobe_bin")
    @classmethod
    def validate_ffprobe_bin(cls, v: str) -> str:
        """Expand environment variables and user home in the executable path."""
        v = os.path.expanduser(os.path.expandvars(v)).strip()
        if not v:
            raise ValueError("ffprobe_bin must not be empty")
        return v


class ReportConfig(BaseModel):
    """Report output configuration."""

    csv_prefix: str = Field(default="media-stats", description="CSV file name prefix")
    timestamp_format: str = Field(
        default="%Y-%m-%d_%H-%M-%S", description="strftime format used in the CSV file name"
    )
    output_dir: Optional[str] = Field(
        default=None, description="Directory for CSV reports (current directory if unset)"
    )

    @field_validator("csv_prefix")
    @classmethod
    def validate_csv_prefix(cls, v: str) -> str:
        """Reject prefixes that would escape the output directory."""
        if not v or "/" in v or "\\" in v:
            raise ValueError("csv_prefix must be a plain file name prefix")
        return v


class ProcessingConfig(BaseModel):
    """Pipeline behavior configuration."""

    skip_missing_dimensions: bool = Field(
        default=False,
        description="Skip files without width/height instead of aborting the run",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Config(BaseModel):
    """Main configuration model."""

    probe: ProbeConfig = Field(default_factory=ProbeConfig, description="Probe configuration")
    report: ReportConfig = Field(default_factory=ReportConfig, description="Report configuration")
    processing: ProcessingConfig = Field(
        default_factory=ProcessingConfig, description="Processing configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )
