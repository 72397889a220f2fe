from .manager import AgentManager
from .exceptions import ProviderError, ProviderConfigurationError

__all__ = ["AgentManager", "ProviderError", "ProviderConfigurationError"]
