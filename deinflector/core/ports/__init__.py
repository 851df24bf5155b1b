from .descriptor_source import IDescriptorSource

__all__ = ["IDescriptorSource"]
