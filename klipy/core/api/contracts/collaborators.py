from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Protocol


class AdParametersProvider(Protocol):
    async def parameters(self) -> Dict[str, Any]:
        ...


class UserAgentSource(Protocol):
    @property
    def value(self) -> str:
        ...


UserAgentLoader = Callable[[], Awaitable[str]]
