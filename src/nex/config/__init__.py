"""Configuration — process-wide defaults captured once at startup."""

from nex.config.settings import NexSettings

__all__: list[str] = ["NexSettings"]
