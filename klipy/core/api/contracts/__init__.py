from klipy.core.api.contracts.collaborators import (
    AdParametersProvider,
    UserAgentLoader,
    UserAgentSource,
)

__all__ = [
    "AdParametersProvider",
    "UserAgentLoader",
    "UserAgentSource",
]
