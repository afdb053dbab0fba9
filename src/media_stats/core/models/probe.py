"""Raw probe output models.

These mirror the subset of ``ffprobe -print_format json -show_format
-show_streams`` output that the extractor reads. Anything else in the
payload is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeTags(BaseModel):
    """Stream tag metadata."""

    language: Optional[str] = Field(None, description="Language tag, e.g. 'eng'")

    model_config = ConfigDict(extra="ignore", frozen=True)


class ProbeStream(BaseModel):
    """A single stream descriptor."""

    index: Optional[int] = Field(None, description="Stream index within the container")
    codec_type: Optional[str] = Field(None, description="video, audio, subtitle, data, ...")
    codec_name: Optional[str] = Field(None, description="Short codec name")
    width: Optional[int] = Field(None, description="Frame width in pixels")
    height: Optional[int] = Field(None, description="Frame height in pixels")
    tags: Optional[ProbeTags] = Field(None, description="Stream tags")

    @property
    def language(self) -> Optional[str]:
        """Get the tagged language, if any."""
        return self.tags.language if self.tags else None

    model_config = ConfigDict(extra="ignore", frozen=True)


class ProbeFormat(BaseModel):
    """Container format descriptor."""

    filename: Optional[str] = Field(None, description="Probed file name")
    format_name: Optional[str] = Field(None, description="Container format name")
    duration: Optional[str] = Field(None, description="Duration in seconds as text")
    size: Optional[str] = Field(None, description="File size in bytes as text")

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)


class RawProbeResult(BaseModel):
    """Structured probe output for one file."""

    streams: List[ProbeStream] = Field(default_factory=list, description="Stream descriptors")
    format: ProbeFormat = Field(default_factory=ProbeFormat, description="Format descriptor")

    model_config = ConfigDict(extra="ignore", frozen=True)
