"""Dependency injection providers for FastAPI."""

from functools import lru_cache

from abrladder.pipeline.manager import LadderPipeline


@lru_cache
def get_ladder_pipeline() -> LadderPipeline:
    return LadderPipeline()
