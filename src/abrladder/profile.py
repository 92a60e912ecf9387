"""Assemble a full ABR profile around a computed video ladder.

A profile holds audio and video ``ladder_specs``, DRM/clear ``playout_formats``
and ``segment_specs``. A parametric profile additionally carries a
``video_parametric_ladder`` that is replaced by concrete video ladder specs
once the ingest video is known.
"""

import copy
import logging
from typing import Any

from abrladder.models.abr_profile import AbrProfile, ProductionMasterSources, ProductionMasterVariant
from abrladder.models.errors import LadderValidationError, ProfileError
from abrladder.models.ladder import DEFAULT_PARAMETRIC_LADDER
from abrladder.models.result import LadderResult
from abrladder.pipeline.manager import LadderPipeline
from abrladder.validation import parse

logger = logging.getLogger(__name__)

ABR_PROFILE_TEMPLATE: dict[str, Any] = {
    "drm_optional": True,
    "store_clear": False,
    "ladder_specs": {
        '{"media_type":"audio","channels":1}': {
            "rung_specs": [{"bit_rate": 192000, "media_type": "audio", "pregenerate": True}]
        },
        '{"media_type":"audio","channels":2}': {
            "rung_specs": [{"bit_rate": 256000, "media_type": "audio", "pregenerate": True}]
        },
        '{"media_type":"audio","channels":6}': {
            "rung_specs": [{"bit_rate": 384000, "media_type": "audio", "pregenerate": True}]
        },
    },
    "playout_formats": {
        "dash-widevine": {
            "drm": {
                "content_id": "",
                "enc_scheme_name": "cenc",
                "license_servers": [],
                "type": "DrmWidevine",
            },
            "protocol": {"min_buffer_length": 2, "type": "ProtoDash"},
        },
        "hls-aes128": {
            "drm": {"enc_scheme_name": "aes-128", "type": "DrmAes128"},
            "protocol": {"type": "ProtoHls"},
        },
        "hls-fairplay": {
            "drm": {"enc_scheme_name": "cbcs", "license_servers": [], "type": "DrmFairplay"},
            "protocol": {"type": "ProtoHls"},
        },
        "hls-sample-aes": {
            "drm": {"enc_scheme_name": "cbcs", "type": "DrmSampleAes"},
            "protocol": {"type": "ProtoHls"},
        },
        "dash-clear": {
            "drm": None,
            "protocol": {"min_buffer_length": 2, "type": "ProtoDash"},
        },
        "hls-clear": {
            "drm": None,
            "protocol": {"type": "ProtoHls"},
        },
    },
    "segment_specs": {
        "audio": {"segs_per_chunk": 15, "target_dur": 2},
        "video": {"segs_per_chunk": 15, "target_dur": 2},
    },
}

DEFAULT_PARAMETRIC_ABR_PROFILE: dict[str, Any] = {
    **copy.deepcopy(ABR_PROFILE_TEMPLATE),
    "video_parametric_ladder": DEFAULT_PARAMETRIC_LADDER.model_dump(by_alias=True, exclude_none=True),
}

PARAMETRIC_LADDER_KEY = "video_parametric_ladder"


def merge_deep(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``; override wins on conflicts."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_deep(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def find_video_stream(
    prod_master_sources: dict[str, Any], prod_master_variant: dict[str, Any]
) -> dict[str, Any] | None:
    """First variant stream whose first source is a video stream, or None."""
    sources = parse(ProductionMasterSources, prod_master_sources).root
    variant = parse(ProductionMasterVariant, prod_master_variant)
    for stream_key, stream in variant.streams.items():
        if not stream.sources:
            raise ProfileError(f"Variant stream '{stream_key}' has no sources")
        file_path = stream.sources[0].files_api_path
        stream_index = stream.sources[0].stream_index
        source_file = sources.get(file_path)
        if source_file is None:
            raise ProfileError(
                f"Variant stream '{stream_key}' references unknown source '{file_path}'",
                details={"files_api_path": file_path},
            )
        if stream_index >= len(source_file.streams):
            raise ProfileError(
                f"Source '{file_path}' has no stream at index {stream_index}",
                details={"files_api_path": file_path, "stream_index": stream_index},
            )
        source_stream = source_file.streams[stream_index]
        if source_stream.get("type") == "StreamVideo":
            return source_stream
    return None


def video_props_from_stream(stream: dict[str, Any]) -> dict[str, Any]:
    props = {
        "avgBitrate": stream.get("bit_rate"),
        "duration": stream.get("duration"),
        "frameRate": stream.get("frame_rate"),
        "height": stream.get("height"),
        "sampleAspectRatio": stream.get("sample_aspect_ratio"),
        "width": stream.get("width"),
    }
    return {k: v for k, v in props.items() if v is not None}


def _checked_copy(profile: dict[str, Any]) -> dict[str, Any]:
    parse(AbrProfile, profile)
    return copy.deepcopy(profile)


def _remove_entries(profile: dict[str, Any], section: str, reject) -> None:
    profile[section] = {k: v for k, v in profile.get(section, {}).items() if not reject(k, v)}


def _require_entries(profile: dict[str, Any], section: str, message: str) -> None:
    if not profile.get(section):
        raise ProfileError(message, details={"section": section})


def exclude_audio(profile: dict[str, Any]) -> dict[str, Any]:
    result = _checked_copy(profile)
    _remove_entries(result, "ladder_specs", lambda k, _: '"media_type":"audio"' in k)
    _remove_entries(result, "segment_specs", lambda k, _: k == "audio")
    _require_entries(result, "ladder_specs", "ABR Profile has no non-audio ladder_specs")
    _require_entries(result, "segment_specs", "ABR Profile has no non-audio segment_specs")
    return result


def exclude_video(profile: dict[str, Any]) -> dict[str, Any]:
    result = _checked_copy(profile)
    _remove_entries(result, "ladder_specs", lambda k, _: '"media_type":"video"' in k)
    _remove_entries(result, "segment_specs", lambda k, _: k == "video")
    result.pop(PARAMETRIC_LADDER_KEY, None)
    _require_entries(result, "ladder_specs", "ABR Profile has no non-video ladder_specs")
    _require_entries(result, "segment_specs", "ABR Profile has no non-video segment_specs")
    return result


def exclude_clear(profile: dict[str, Any]) -> dict[str, Any]:
    result = _checked_copy(profile)
    _remove_entries(result, "playout_formats", lambda _, v: v.get("drm") is None)
    _require_entries(result, "playout_formats", "ABR Profile has no non-clear playout_formats")
    return result


def exclude_drm(profile: dict[str, Any]) -> dict[str, Any]:
    result = _checked_copy(profile)
    _remove_entries(result, "playout_formats", lambda _, v: v.get("drm") is not None)
    _require_entries(result, "playout_formats", "ABR Profile has no non-DRM playout_formats")
    return result


EXCLUSIONS = {
    "audio": exclude_audio,
    "video": exclude_video,
    "clear": exclude_clear,
    "drm": exclude_drm,
}


def _to_result(fn, *args) -> LadderResult:
    try:
        return LadderResult.success(fn(*args))
    except LadderValidationError as e:
        return LadderResult.failure(e.errors)
    except ProfileError as e:
        logger.warning("ABR profile assembly failed: %s", e.message)
        return LadderResult.failure([e.message])


def build_profile_for_variant(
    prod_master_sources: dict[str, Any],
    prod_master_variant: dict[str, Any],
    abr_profile: dict[str, Any] | None = None,
    standard_aspect_ratios: Any = None,
    pipeline: LadderPipeline | None = None,
) -> dict[str, Any]:
    """Concrete ABR profile for a production master variant (raises on failure)."""
    profile = DEFAULT_PARAMETRIC_ABR_PROFILE if abr_profile is None else abr_profile
    parse(AbrProfile, profile)
    video_stream = find_video_stream(prod_master_sources, prod_master_variant)
    if video_stream is None:
        logger.info("No video stream in variant, building audio-only profile")
        return exclude_video(profile)

    pipeline = pipeline or LadderPipeline()
    ladder_specs = pipeline.compute_ladder_specs(
        video_props_from_stream(video_stream),
        profile.get(PARAMETRIC_LADDER_KEY),
        standard_aspect_ratios,
    )
    merged = merge_deep(profile, {"ladder_specs": ladder_specs.model_dump()})
    merged.pop(PARAMETRIC_LADDER_KEY, None)
    return merged


def abr_profile_for_variant(
    prod_master_sources: dict[str, Any],
    prod_master_variant: dict[str, Any],
    abr_profile: dict[str, Any] | None = None,
    standard_aspect_ratios: Any = None,
) -> LadderResult:
    """Envelope-returning form of ``build_profile_for_variant``."""
    return _to_result(
        build_profile_for_variant,
        prod_master_sources,
        prod_master_variant,
        abr_profile,
        standard_aspect_ratios,
    )


def profile_exclude_audio(abr_profile: dict[str, Any]) -> LadderResult:
    return _to_result(exclude_audio, abr_profile)


def profile_exclude_video(abr_profile: dict[str, Any]) -> LadderResult:
    return _to_result(exclude_video, abr_profile)


def profile_exclude_clear(abr_profile: dict[str, Any]) -> LadderResult:
    return _to_result(exclude_clear, abr_profile)


def profile_exclude_drm(abr_profile: dict[str, Any]) -> LadderResult:
    return _to_result(exclude_drm, abr_profile)
