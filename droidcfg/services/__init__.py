"""Services composing the core loaders."""

from .descriptor import DescriptorError, DescriptorService, LoadedDescriptor

__all__ = ["DescriptorError", "DescriptorService", "LoadedDescriptor"]
