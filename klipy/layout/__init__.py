from klipy.layout.rows import MediaRow, layout_rows
from klipy.layout.sizing import Size, fit_in_box, item_sizing_in_box, preview_sizing_for

__all__ = [
    "MediaRow",
    "Size",
    "fit_in_box",
    "item_sizing_in_box",
    "layout_rows",
    "preview_sizing_for",
]
