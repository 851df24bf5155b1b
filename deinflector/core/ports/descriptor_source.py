# deinflector/core/ports/descriptor_source.py
from typing import Callable, Optional, Protocol

from deinflector.core.domain.descriptor import LanguageDescriptor


class IDescriptorSource(Protocol):
    """
    Port for static rule tables.
    Implementations:
    - JsonTableSource (packaged JSON tables, or an override directory)
    """

    def load_descriptor(
        self,
        name: str,
        normalize: Optional[Callable[[str], str]] = None,
    ) -> LanguageDescriptor:
        """
        Loads the table called `name` and builds its descriptor.

        Args:
            name: Table name (e.g. 'japanese').
            normalize: Optional function applied to every affix string before
                the descriptor is built (e.g. Hangul disassembly).

        Raises:
            TableNotFoundError: If no table exists under that name.
            TableSchemaError: If the table is not valid JSON or violates the schema.
            UnknownConditionError: If a rule references an undefined condition.
        """
        ...
