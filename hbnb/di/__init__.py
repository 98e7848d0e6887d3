from .container import DIContainer, build_facade

__all__ = ["DIContainer", "build_facade"]
