"""
Composition root: builds the JSON pipeline with the stages in the order they must run.

Decoding, innermost first:
  PhoneNumber hook      JSON scalar -> PhoneNumber with the configured parser
  JsonRecord hook       null optional_field() values -> registered absent value,
                        then validate() on the finished, normalized record
Encoding runs validate() first, then the PhoneNumber hook writes the raw text.
"""

import logging
from collections.abc import Iterable
from typing import Any

from phonecodec.application.ports import PhoneNumberParser
from phonecodec.application.registry import DefaultValueRegistry
from phonecodec.domain import PhoneNumber
from phonecodec.infrastructure.config import Settings
from phonecodec.infrastructure.json_pipeline import JsonPipeline

logger = logging.getLogger(__name__)


def default_registry() -> DefaultValueRegistry:
    return DefaultValueRegistry.builder().register(PhoneNumber, PhoneNumber.absent).build()


def build_pipeline(
    *,
    registry: DefaultValueRegistry | None = None,
    parser: PhoneNumberParser | None = None,
    settings: Settings | None = None,
    preload: Iterable[Any] = (),
) -> JsonPipeline:
    """
    Build a ready-to-share JsonPipeline.

    parser overrides the one chosen by settings (strict by default). Types in preload
    get their TypeAdapters built right away, so a missing default value registration
    fails here with ConfigurationError instead of on the first record.
    """
    settings = settings or Settings()
    if registry is None:
        registry = default_registry()
    parser = parser or settings.make_parser()
    pipeline = JsonPipeline(registry, parser=parser, serialize_nulls=settings.serialize_nulls)
    preload = tuple(preload)
    for type_ in preload:
        pipeline.adapter_for(type_)
    logger.debug(
        "Built JSON pipeline: parser=%s, %d registered defaults, %d preloaded types",
        type(parser).__name__,
        len(registry),
        len(preload),
    )
    return pipeline
