from PIL import Image

from gopractice.draw import BLUE, RED, draw_square, draw_squares, main


def collect(left, top, base):
    points = []
    draw_square(left, top, base, lambda x, y: points.append((x, y)))
    return points


def test_square_points_lie_on_outline():
    left, top, base = 2, 3, 4
    right, bottom = left + base, top + base
    points = collect(left, top, base)
    assert points
    for x, y in points:
        assert left <= x <= right and top <= y <= bottom
        assert x in (left, right) or y in (top, bottom)
    assert {(left, top), (right, top), (left, bottom), (right, bottom)} <= set(points)
    assert (left + 1, top + 1) not in points


def test_square_starts_at_top_left():
    assert collect(2, 3, 4)[:2] == [(2, 3), (2, 7)]


def test_square_of_zero_size_is_single_point():
    assert set(collect(5, 5, 0)) == {(5, 5)}


def test_draw_squares_colours():
    image = draw_squares()
    assert image.size == (300, 200)
    assert image.getpixel((30, 20)) == RED
    assert image.getpixel((29, 19)) == RED
    assert image.getpixel((100, 120)) == BLUE
    assert image.getpixel((99, 120)) == (0, 0, 0, 0)


def test_draw_squares_clips_to_small_image():
    assert draw_squares(20, 20).getbbox() is None


def test_main_writes_png(tmp_path):
    path = tmp_path / "squares.png"
    assert main([str(path)]) == 0
    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == (300, 200)
        assert image.convert("RGBA").getpixel((100, 120)) == BLUE