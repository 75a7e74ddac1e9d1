from .registry import CLIENT_REGISTRY, ClientRegistry, DECORATOR_REGISTRY, DEFAULT_NAME, DecoratorRegistry

__all__ = [
    "CLIENT_REGISTRY",
    "ClientRegistry",
    "DECORATOR_REGISTRY",
    "DEFAULT_NAME",
    "DecoratorRegistry",
]
