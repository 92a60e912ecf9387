"""Validated ladder generation pipeline."""

from abrladder.pipeline.manager import LadderPipeline, video_ladder_specs

__all__ = ["LadderPipeline", "video_ladder_specs"]
