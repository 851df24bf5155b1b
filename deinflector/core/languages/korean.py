# deinflector/core/languages/korean.py
"""
KOREAN DEINFLECTION MODULE
--------------------------
The Korean rule table is written over decomposed letters, so the generic
engine runs on disassembled text:

    "한글이다" -> "ㅎㅏㄴㄱㅡㄹㅇㅣㄷㅏ" -> engine -> reassemble -> "한글", ...

Condition tags and traces are dropped at this boundary for the string API;
results are de-duplicated by their recomposed text.
"""

from dataclasses import replace
from typing import List

from ..domain.models import DeinflectionCandidate
from ..engine.transformer import deinflect, unique_texts
from ..ports.descriptor_source import IDescriptorSource
from .base import Deinflector, register_language
from .hangul import disassemble, reassemble

TABLE_NAME = "korean"


class KoreanDeinflector(Deinflector):
    """Wraps the engine with Hangul disassembly/reassembly."""

    def candidates(self, text: str) -> List[DeinflectionCandidate]:
        return [
            replace(candidate, text=reassemble(candidate.text))
            for candidate in deinflect(self.descriptor, disassemble(text))
        ]

    def deinflect(self, text: str) -> List[str]:
        return unique_texts(self.candidates(text))


@register_language("ko", "Korean")
def create_deinflector(source: IDescriptorSource) -> KoreanDeinflector:
    # Tables may spell affixes with whole syllables; the engine only sees letters.
    return KoreanDeinflector(source.load_descriptor(TABLE_NAME, normalize=disassemble))
