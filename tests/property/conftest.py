"""Hypothesis strategies for property-based testing."""

from hypothesis import strategies as st

from abrladder.models.video import VideoProperties

FRAME_RATES = ["24", "25", "30", "30000/1001", "50", "60", "60000/1001"]
SAMPLE_ASPECT_RATIOS = ["8/9", "10/11", "32/27", "40/33", "4/3"]


@st.composite
def generate_landscape_video(draw):
    """Generate a landscape (or square) video that satisfies the default limits."""
    height = draw(st.integers(min_value=50, max_value=1080)) * 2
    width = draw(st.integers(min_value=height // 2, max_value=min(3 * height, 5000) // 2)) * 2
    return VideoProperties(
        width=width,
        height=height,
        sample_aspect_ratio="1",
        frame_rate=draw(st.sampled_from(FRAME_RATES)),
    )


@st.composite
def generate_anamorphic_video(draw):
    """Generate a video with non-square pixels."""
    height = draw(st.integers(min_value=50, max_value=1080)) * 2
    width = draw(st.integers(min_value=height // 2, max_value=3 * height // 2)) * 2
    return VideoProperties(
        width=width,
        height=height,
        sample_aspect_ratio=draw(st.sampled_from(SAMPLE_ASPECT_RATIOS)),
        frame_rate=draw(st.sampled_from(FRAME_RATES)),
    )


@st.composite
def generate_video_any_orientation(draw):
    """Generate a landscape or portrait video that satisfies the default limits."""
    video = draw(generate_landscape_video())
    if draw(st.booleans()):
        return video.model_copy(update={"width": video.height, "height": video.width})
    return video


@st.composite
def generate_ladder_options(draw, min_dim_stepdown=0.0):
    """Generate valid camelCase parametric ladder options."""
    return {
        "upscale": draw(st.booleans()),
        "snapAR": draw(st.booleans()),
        "maxARSnap": draw(st.floats(min_value=0.0, max_value=0.2)),
        "minDimStepdown": draw(st.floats(min_value=min_dim_stepdown, max_value=0.3)),
        "frameRateScaleFactor": draw(st.floats(min_value=0.0, max_value=1.0)),
    }


@st.composite
def generate_aspect_ratio(draw):
    """Generate a landscape aspect ratio between 1 and 3 as (width, height)."""
    height = draw(st.integers(min_value=1, max_value=2000))
    width = draw(st.integers(min_value=height, max_value=3 * height))
    return width, height
