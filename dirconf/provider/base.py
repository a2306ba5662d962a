"""
Configuration provider base classes.

This module defines the snapshot type handed to consumers and the contract
every configuration source implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from queue import Queue
from typing import Any, Dict

from dirconf.core.enums import ProviderType


@dataclass(frozen=True)
class Data:
    """
    One fully merged configuration snapshot.
    
    A new instance is produced on every load; ownership passes to whoever
    takes it off the provider's output queue.
    """
    type: ProviderType
    config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls, provider_type: ProviderType) -> "Data":
        return cls(type=provider_type, config={})


class ConfigProvider(ABC):
    """
    Abstract base class for configuration providers.
    
    Defines the interface that all configuration sources must implement.
    """

    provider_type: ProviderType

    @abstractmethod
    def provide(self, data_queue: "Queue[Data]") -> Data:
        """
        Load the initial snapshot and, if the source supports it, start
        publishing later snapshots onto ``data_queue``.
        
        The queue belongs to the caller; providers only ever put to it.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the provider."""
        pass
