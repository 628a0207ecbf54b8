"""Tests for row packing and item sizing."""

from __future__ import annotations

import pytest

from klipy.core.dto.media import AdContentProperties, MediaDomainModel, MediaFile, MediaFileVariant, MediaType
from klipy.layout import MediaRow, Size, fit_in_box, layout_rows, preview_sizing_for


def item(item_id: int, width: int, height: int) -> MediaDomainModel:
    v = MediaFileVariant(url="u", width=width, height=height)
    return MediaDomainModel(
        id=item_id,
        title=f"i{item_id}",
        slug=f"i{item_id}",
        type=MediaType.GIF,
        sm=MediaFile(gif=v, webp=v),
    )


def ad(item_id: int, width: int, height: int) -> MediaDomainModel:
    return MediaDomainModel(
        id=item_id,
        title="",
        slug="",
        type=MediaType.AD,
        ad_content_properties=AdContentProperties(width=width, height=height, content="<ad/>"),
    )


class TestPreviewSizing:
    def test_scales_to_height(self):
        assert preview_sizing_for(item(1, 400, 200), 100) == Size(200, 100)

    def test_ads_are_not_rescaled(self):
        assert preview_sizing_for(ad(1, 320, 250), 100) == Size(320, 250)

    @pytest.mark.parametrize("width,height,target", [(0, 100, 100), (100, 0, 100), (100, 100, 0), (100, 100, -5)])
    def test_degenerate(self, width, height, target):
        assert preview_sizing_for(item(1, width, height), target).is_zero

    def test_no_files(self):
        empty = MediaDomainModel(id=1, title="", slug="", type=MediaType.GIF)
        assert preview_sizing_for(empty, 100) == Size.ZERO

    def test_model_shortcut(self):
        assert item(1, 300, 100).preview_sizing_for(50) == Size(150, 50)


class TestLayoutRows:
    def test_greedy_wrap(self):
        items = [item(1, 200, 100), item(2, 100, 100), item(3, 300, 100)]
        rows = layout_rows(items, row_height=100, max_width=450)
        assert [[i.id for i in r.items] for r in rows] == [[1, 2], [3]]
        assert rows[0].row_width == 300
        assert rows[1].row_width == 300
        assert rows[0].row_height == 100

    def test_degenerate_item_is_dropped(self):
        items = [item(1, 100, 100), item(2, 100, 0), item(3, 100, 100)]
        rows = layout_rows(items, row_height=100, max_width=1000)
        assert len(rows) == 1
        assert [i.id for i in rows[0].items] == [1, 3]

    @pytest.mark.parametrize("width,height", [(0, 250), (300, 0)])
    def test_degenerate_ad_is_dropped(self, width, height):
        items = [item(1, 100, 100), ad(2, width, height), item(3, 100, 100)]
        rows = layout_rows(items, row_height=100, max_width=1000)
        assert [[i.id for i in r.items] for r in rows] == [[1, 3]]
        assert rows[0].row_width == 200
        assert rows[0].row_height == 100

    def test_last_row_is_emitted(self):
        rows = layout_rows([item(1, 100, 100)], row_height=100, max_width=1000)
        assert len(rows) == 1
        assert rows[0].row_width == 100

    def test_empty_input(self):
        assert layout_rows([], row_height=100, max_width=400) == []

    def test_oversized_item_gets_own_row(self):
        items = [item(1, 100, 100), item(2, 1000, 100), item(3, 100, 100)]
        rows = layout_rows(items, row_height=100, max_width=400)
        assert [[i.id for i in r.items] for r in rows] == [[1], [2], [3]]

    def test_ad_raises_row_height(self):
        rows = layout_rows([item(1, 100, 100), ad(2, 300, 250)], row_height=100, max_width=1000)
        assert rows[0].row_height == 250
        assert rows[0].row_width == 400

    def test_row_height_resets_per_row(self):
        rows = layout_rows([ad(1, 300, 250), item(2, 300, 100)], row_height=100, max_width=400)
        assert [r.row_height for r in rows] == [250, 100]

    def test_invariants(self):
        sizes = [(200, 100), (50, 100), (300, 150), (0, 10), (120, 60), (500, 100), (90, 30), (10, 10)]
        items = [item(i, w, h) for i, (w, h) in enumerate(sizes, start=1)]
        rows = layout_rows(items, row_height=80, max_width=350)

        assert all(r.items for r in rows)
        for r in rows[:-1]:
            if len(r.items) > 1:
                assert r.row_width <= 350
        flattened = [i.id for r in rows for i in r.items]
        assert flattened == [i.id for i in items if i.id != 4]

    def test_idempotent(self):
        items = [item(i, 100 + i * 10, 100) for i in range(20)]
        first = layout_rows(items, 120, 500)
        second = layout_rows(items, 120, 500)
        assert first == second
        assert [r.id for r in first] == [r.id for r in second]

    def test_accepts_generators(self):
        rows = layout_rows((item(i, 100, 100) for i in range(3)), 100, 1000)
        assert rows[0].id == "0-1-2"


class TestMediaRow:
    def test_id(self):
        row = MediaRow((item(4, 1, 1), item(9, 1, 1)), 100, 200)
        assert row.id == "4-9"

    def test_possible_height(self):
        row = MediaRow((item(1, 1, 1),), row_height=100, row_width=300)
        assert row.possible_height(600) == 200
        assert row.possible_height(150) == 50

    def test_possible_height_degenerate(self):
        assert MediaRow((), 100, 0).possible_height(300) == 0
        assert MediaRow((), 100, 300).possible_height(0) == 0


class TestFitInBox:
    def test_width_only(self):
        assert fit_in_box(400, 200, max_width=100) == Size(100, 50)

    def test_height_only(self):
        assert fit_in_box(400, 200, max_height=100) == Size(200, 100)

    def test_both_bounds_use_smaller_ratio(self):
        assert fit_in_box(400, 200, max_width=100, max_height=100) == Size(100, 50)
        assert fit_in_box(200, 400, max_width=100, max_height=100) == Size(50, 100)

    def test_no_bounds(self):
        assert fit_in_box(400, 200) == Size.ZERO

    def test_degenerate_source(self):
        assert fit_in_box(0, 200, max_width=100) == Size.ZERO

    def test_item_in_box(self):
        assert item(1, 400, 200).sizing_in_box(max_width=100) == Size(100, 50)
        assert ad(2, 300, 250).sizing_in_box() == Size.ZERO
