"""Shared test fixtures."""

import copy

import pytest

from abrladder.config import Settings
from abrladder.models.ladder import DEFAULT_PARAMETRIC_LADDER
from abrladder.models.video import VideoProperties
from abrladder.pipeline.manager import LadderPipeline

DEFAULT_VIDEO_LADDER_SPEC = {
    '{"media_type":"video","aspect_ratio_height":9,"aspect_ratio_width":16}': {
        "rung_specs": [
            {"bit_rate": 14000000, "height": 2160, "media_type": "video", "pregenerate": True, "width": 3840},
            {"bit_rate": 11500000, "height": 1440, "media_type": "video", "pregenerate": False, "width": 2560},
            {"bit_rate": 9500000, "height": 1080, "media_type": "video", "pregenerate": False, "width": 1920},
            {"bit_rate": 4500000, "height": 720, "media_type": "video", "pregenerate": False, "width": 1280},
            {"bit_rate": 1750000, "height": 480, "media_type": "video", "pregenerate": False, "width": 854},
            {"bit_rate": 810000, "height": 360, "media_type": "video", "pregenerate": False, "width": 640},
            {"bit_rate": 500000, "height": 240, "media_type": "video", "pregenerate": False, "width": 426},
        ]
    }
}

PM_SOURCES_TEST_MP4 = {
    "test.mp4": {
        "container_format": {
            "duration": 242.875,
            "filename": "test.mp4",
            "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
            "start_time": 0,
        },
        "streams": [
            {
                "bit_rate": 2801771,
                "codec_name": "h264",
                "display_aspect_ratio": "16/9",
                "duration": 242.875,
                "frame_count": 5829,
                "frame_rate": "24",
                "height": 1080,
                "sample_aspect_ratio": "1",
                "time_base": "1/12288",
                "type": "StreamVideo",
                "width": 1920,
            },
            {
                "bit_rate": 128013,
                "channel_layout": "stereo",
                "channels": 2,
                "codec_name": "aac",
                "duration": 242.83428571428573,
                "sample_rate": 44100,
                "time_base": "1/44100",
                "type": "StreamAudio",
            },
        ],
    }
}

PM_VARIANT_TEST_MP4 = {
    "streams": {
        "audio": {
            "default_for_media_type": False,
            "label": "",
            "sources": [{"files_api_path": "test.mp4", "stream_index": 1}],
        },
        "video": {
            "default_for_media_type": False,
            "label": "",
            "sources": [{"files_api_path": "test.mp4", "stream_index": 0}],
        },
    }
}


def ladder_with(options: dict | None = None, limits: dict | None = None, **fields) -> dict:
    """Default parametric ladder document with selected parts overridden."""
    doc = DEFAULT_PARAMETRIC_LADDER.model_dump(by_alias=True, exclude_none=True)
    doc["options"].update(options or {})
    doc["limits"].update(limits or {})
    doc.update(fields)
    return doc


def video(width: int, height: int, frame_rate: str = "30", sar: str = "1", **extra) -> VideoProperties:
    return VideoProperties(
        width=width, height=height, frame_rate=frame_rate, sample_aspect_ratio=sar, **extra
    )


def only_entry(ladder_specs: dict) -> tuple[str, list[dict]]:
    """The single (key, rung_specs) pair of a video ladder spec."""
    assert len(ladder_specs) == 1
    key, entry = next(iter(ladder_specs.items()))
    return key, entry["rung_specs"]


@pytest.fixture
def pipeline():
    return LadderPipeline(Settings())


@pytest.fixture
def default_ladder_doc():
    return ladder_with()


@pytest.fixture
def hd_video():
    """1080p, 24 fps, square pixels."""
    return video(1920, 1080, frame_rate="24")


@pytest.fixture
def pm_sources():
    return copy.deepcopy(PM_SOURCES_TEST_MP4)


@pytest.fixture
def pm_variant():
    return copy.deepcopy(PM_VARIANT_TEST_MP4)
