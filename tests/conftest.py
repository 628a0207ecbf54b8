"""Shared fixtures: a local aiohttp server that mimics the Klipy API."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from klipy.core.api.base import APIClient

API_PREFIX = "/api/v1/test-key/"


@dataclass
class RecordedRequest:
    method: str
    path: str
    raw_path: str
    query: Dict[str, str]
    headers: Dict[str, str]
    body: bytes

    @property
    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


@dataclass
class FakeKlipyServer:
    # (METHOD, path relative to API_PREFIX) -> (status, body)
    responses: Dict[Tuple[str, str], Tuple[int, Any]] = field(default_factory=dict)
    requests: List[RecordedRequest] = field(default_factory=list)

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self._handle)
        return app

    async def _handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                raw_path=request.raw_path,
                query=dict(request.query),
                headers=dict(request.headers),
                body=body,
            )
        )
        relative = request.path[len(API_PREFIX):] if request.path.startswith(API_PREFIX) else request.path
        status, payload = self.responses.get((request.method, relative), (404, b"not found"))
        if isinstance(payload, (bytes, str)):
            return web.Response(status=status, body=payload if isinstance(payload, bytes) else payload.encode())
        return web.json_response(payload, status=status)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


Scenario = Callable[[APIClient, str, FakeKlipyServer], Awaitable[Any]]


@pytest.fixture
def serve():
    """
    Run ``scenario(client, base_url, server)`` against a fresh fake server.

    Usage: ``serve(responses, scenario, ad_parameters=..., user_agent=...)``
    """

    def _run(
        responses: Dict[Tuple[str, str], Tuple[int, Any]],
        scenario: Scenario,
        *,
        ad_parameters=None,
        user_agent=None,
    ) -> Tuple[Any, FakeKlipyServer]:
        server = FakeKlipyServer(responses=dict(responses))

        async def _inner():
            async with TestServer(server.app()) as test_server:
                base_url = str(test_server.make_url(API_PREFIX))
                async with aiohttp.ClientSession() as session:
                    client = APIClient(
                        session=session,
                        ad_parameters=ad_parameters,
                        user_agent=user_agent,
                    )
                    return await scenario(client, base_url, server)

        return asyncio.run(_inner()), server

    return _run


# ----------------------------------------------------------------------
# Payload builders
# ----------------------------------------------------------------------

def variant(width: int, height: int, url: str = "https://cdn.test/a.gif") -> Dict[str, Any]:
    return {"url": url, "width": width, "height": height}


def media_file(width: int, height: int, with_mp4: bool = False) -> Dict[str, Any]:
    out = {"gif": variant(width, height), "webp": variant(width, height, "https://cdn.test/a.webp")}
    if with_mp4:
        out["mp4"] = variant(width, height, "https://cdn.test/a.mp4")
    return out


def gif_item(item_id: int, width: int = 200, height: int = 100, item_type: Optional[str] = "gif") -> Dict[str, Any]:
    raw = {
        "id": item_id,
        "slug": f"item-{item_id}",
        "title": f"Item {item_id}",
        "blur_preview": None,
        "file": {
            "hd": media_file(width * 4, height * 4, with_mp4=True),
            "md": media_file(width * 2, height * 2),
            "sm": media_file(width, height),
            "xs": media_file(width // 2, height // 2),
        },
    }
    if item_type is not None:
        raw["type"] = item_type
    return raw


def clip_item(item_id: int, width: int = 160, height: int = 90) -> Dict[str, Any]:
    return {
        "id": item_id,
        "slug": f"clip-{item_id}",
        "title": f"Clip {item_id}",
        "type": "clip",
        "file": media_file(width, height, with_mp4=True),
    }


def ad_item(width: int = 300, height: int = 250, content: str = "<div>ad</div>") -> Dict[str, Any]:
    return {"type": "ad", "content": content, "width": width, "height": height}


def page_payload(
    items: List[Dict[str, Any]],
    current_page: int = 1,
    per_page: int = 24,
    has_next: bool = True,
) -> Dict[str, Any]:
    return {
        "result": True,
        "data": {
            "data": items,
            "current_page": current_page,
            "per_page": per_page,
            "has_next": has_next,
            "meta": {"item_min_width": 50, "ad_max_resize_percent": 45},
        },
    }
