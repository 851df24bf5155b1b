# deinflector/core/languages/japanese.py
"""
Japanese: descriptor loaded from the packaged static table.

The table covers verb classes (v1, v5, vk, vs, vz), i-adjectives and the
common auxiliaries (-masu, -nai, -ta, -te, -tai, -ba, potential, passive,
causative, volitional, imperative, -te iru, -chau).
"""

from ..ports.descriptor_source import IDescriptorSource
from .base import Deinflector, register_language

TABLE_NAME = "japanese"


@register_language("ja", "Japanese")
def create_deinflector(source: IDescriptorSource) -> Deinflector:
    return Deinflector(source.load_descriptor(TABLE_NAME))
