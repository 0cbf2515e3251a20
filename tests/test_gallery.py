# tests/test_gallery.py
from showroom.models import MediaItem
from showroom.services.gallery import Gallery, STATE_EMPTY, STATE_IMAGE, STATE_VIDEO


def _items(n, video_at=()):
    return [
        MediaItem("video" if i in video_at else "image", f"http://u/{i}", f"item {i}")
        for i in range(n)
    ]


def test_wraparound_forward_and_back():
    g = Gallery(_items(3))
    assert g.cursor == 0
    assert g.retreat() == 2
    assert g.advance() == 0
    g.select(2)
    assert g.advance() == 0


def test_full_cycle_returns_to_start():
    g = Gallery(_items(4))
    for _ in range(4):
        g.advance()
    assert g.cursor == 0


def test_single_item_has_no_navigation():
    g = Gallery(_items(1))
    assert not g.has_navigation
    assert g.advance() == 0
    assert g.retreat() == 0
    assert g.state == STATE_IMAGE


def test_empty_gallery():
    g = Gallery([])
    assert not g.has_navigation
    assert g.current is None
    assert g.state == STATE_EMPTY
    assert g.advance() == 0


def test_open_resets_cursor():
    g = Gallery(_items(3), cursor=2)
    assert g.cursor == 2
    g.open(_items(2))
    assert g.cursor == 0
    assert len(g) == 2


def test_state_follows_item_kind():
    g = Gallery(_items(2, video_at={1}))
    assert g.state == STATE_IMAGE
    g.advance()
    assert g.state == STATE_VIDEO
    assert g.current.src == "http://u/1"


def test_request_arg_is_clamped():
    items = _items(3)
    assert Gallery.from_request_arg(items, "2").cursor == 2
    assert Gallery.from_request_arg(items, "3").cursor == 0
    assert Gallery.from_request_arg(items, "-1").cursor == 0
    assert Gallery.from_request_arg(items, "abc").cursor == 0
    assert Gallery.from_request_arg(items, None).cursor == 0
    assert Gallery.from_request_arg([], "1").cursor == 0


def test_prev_next_indices():
    g = Gallery(_items(3))
    assert (g.prev_index, g.next_index) == (2, 1)
    g.select(2)
    assert (g.prev_index, g.next_index) == (1, 0)
