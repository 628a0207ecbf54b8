"""Tests for endpoint descriptors."""

from __future__ import annotations

import dataclasses

import pytest

from klipy.core.api.endpoints import (
    MEDIA_ENDPOINTS,
    Categories,
    HideFromRecent,
    HTTPMethod,
    ParameterEncoding,
    Recent,
    Report,
    Search,
    Share,
    Trending,
    View,
    describe,
)
from klipy.core.dto.media import MediaType


def all_endpoints(media_type: MediaType):
    return [
        Trending(media_type, page=1, per_page=24, customer_id="c1", locale="ka"),
        Search(media_type, query="cats", page=2, per_page=10, customer_id="c1", locale="en"),
        Categories(media_type),
        Recent(media_type, customer_id="c1", page=1, per_page=24),
        HideFromRecent(media_type, customer_id="c1", slug="s"),
        View(media_type, slug="s", customer_id="c1"),
        Share(media_type, slug="s", customer_id="c1"),
        Report(media_type, slug="s", customer_id="c1", reason="spam"),
    ]


class TestEndpointTable:
    @pytest.mark.parametrize("media_type", [MediaType.GIF, MediaType.STICKER, MediaType.CLIP])
    def test_paths(self, media_type):
        prefix = media_type.path_prefix
        paths = [e.path for e in all_endpoints(media_type)]
        assert paths == [
            f"{prefix}/trending",
            f"{prefix}/search",
            f"{prefix}/categories",
            f"{prefix}/recent/c1",
            f"{prefix}/recent/c1",
            f"{prefix}/view/s",
            f"{prefix}/share/s",
            f"{prefix}/report/s",
        ]

    def test_prefixes(self):
        assert MediaType.GIF.path_prefix == "gifs"
        assert MediaType.STICKER.path_prefix == "stickers"
        assert MediaType.CLIP.path_prefix == "clips"
        with pytest.raises(ValueError):
            MediaType.AD.path_prefix

    def test_methods(self):
        methods = [e.method for e in all_endpoints(MediaType.GIF)]
        assert methods == [
            HTTPMethod.GET,
            HTTPMethod.GET,
            HTTPMethod.GET,
            HTTPMethod.GET,
            HTTPMethod.DELETE,
            HTTPMethod.POST,
            HTTPMethod.POST,
            HTTPMethod.POST,
        ]

    def test_json_encoding_only_for_tracking_calls(self):
        for endpoint in all_endpoints(MediaType.STICKER):
            is_tracking = isinstance(endpoint, (View, Share, Report))
            assert (endpoint.encoding is ParameterEncoding.JSON) == is_tracking

    def test_closed_set_is_covered(self):
        assert {type(e) for e in all_endpoints(MediaType.GIF)} == set(MEDIA_ENDPOINTS)


class TestEndpointParameters:
    def test_trending(self):
        e = Trending(MediaType.GIF, page=3, per_page=24, customer_id="c1", locale="ka")
        assert e.parameters == {"page": 3, "per_page": 24, "customer_id": "c1", "locale": "ka"}

    def test_search(self):
        e = Search(MediaType.GIF, query="dog", page=1, per_page=5, customer_id="c1", locale="en")
        assert e.parameters == {"q": "dog", "page": 1, "per_page": 5, "customer_id": "c1", "locale": "en"}

    def test_categories_has_no_parameters(self):
        assert Categories(MediaType.CLIP).parameters is None

    def test_recent_does_not_repeat_customer_id(self):
        e = Recent(MediaType.GIF, customer_id="c1", page=1, per_page=24)
        assert e.parameters == {"page": 1, "per_page": 24}

    def test_hide_from_recent(self):
        e = HideFromRecent(MediaType.GIF, customer_id="c1", slug="funny-cat")
        assert e.parameters == {"slug": "funny-cat"}
        assert e.encoding is ParameterEncoding.URL

    def test_report(self):
        e = Report(MediaType.GIF, slug="s", customer_id="c1", reason="nsfw")
        assert e.parameters == {"customer_id": "c1", "reason": "nsfw"}

    def test_headers_default_to_none(self):
        assert all(e.headers is None for e in all_endpoints(MediaType.GIF))


class TestEndpointValues:
    def test_descriptors_are_immutable(self):
        e = View(MediaType.GIF, slug="s", customer_id="c1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.slug = "other"

    def test_same_arguments_compare_equal(self):
        a = Share(MediaType.GIF, slug="s", customer_id="c1")
        b = Share(MediaType.GIF, slug="s", customer_id="c1")
        assert a == b

    def test_slug_is_quoted_as_single_segment(self):
        e = View(MediaType.GIF, slug="a/b c", customer_id="c1")
        assert e.path == "gifs/view/a%2Fb%20c"

    def test_describe(self):
        d = describe(Report(MediaType.CLIP, slug="s", customer_id="c1", reason="spam"))
        assert d == {
            "path": "clips/report/s",
            "method": "POST",
            "parameters": {"customer_id": "c1", "reason": "spam"},
            "encoding": "json",
            "headers": None,
        }
