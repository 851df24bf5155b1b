# deinflector/core/languages/spanish.py
"""Spanish: descriptor loaded from the packaged static table."""

from ..ports.descriptor_source import IDescriptorSource
from .base import Deinflector, register_language

TABLE_NAME = "spanish"


@register_language("es", "Spanish")
def create_deinflector(source: IDescriptorSource) -> Deinflector:
    return Deinflector(source.load_descriptor(TABLE_NAME))
