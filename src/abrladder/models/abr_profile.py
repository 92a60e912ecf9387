"""Shapes of the production master and ABR profile documents.

Only the parts that profile assembly reads are declared; anything else in
these documents is carried through unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel

_OPEN_CONFIG = ConfigDict(frozen=True, extra="allow")


class StreamSource(BaseModel):
    """Reference from a variant stream to one stream of a source file."""

    model_config = _OPEN_CONFIG

    files_api_path: str
    stream_index: int = Field(..., ge=0, strict=True)


class VariantStream(BaseModel):
    model_config = _OPEN_CONFIG

    sources: list[StreamSource] = Field(default_factory=list)


class ProductionMasterVariant(BaseModel):
    model_config = _OPEN_CONFIG

    streams: dict[str, VariantStream] = Field(default_factory=dict)


class SourceFile(BaseModel):
    """Source file; each stream is the raw media record for that stream."""

    model_config = _OPEN_CONFIG

    streams: list[dict[str, Any]]


class ProductionMasterSources(RootModel[dict[str, SourceFile]]):
    """Source files keyed by their files API path."""


class PlayoutFormat(BaseModel):
    model_config = _OPEN_CONFIG

    drm: dict[str, Any] | None = None
    protocol: dict[str, Any]


class AbrProfile(BaseModel):
    model_config = _OPEN_CONFIG

    ladder_specs: dict[str, dict[str, Any]] = Field(default_factory=dict)
    playout_formats: dict[str, PlayoutFormat] = Field(default_factory=dict)
    segment_specs: dict[str, dict[str, Any]] = Field(default_factory=dict)
    video_parametric_ladder: dict[str, Any] | None = None
