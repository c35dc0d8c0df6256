from .platform import PlatformRegistryFactoryProtocol, PlatformRegistryProtocol

__all__ = [
    'PlatformRegistryFactoryProtocol',
    'PlatformRegistryProtocol',
]
