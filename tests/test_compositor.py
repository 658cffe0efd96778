"""Tests for pixelify.core.compositor — fit, composite and image loading."""

import io
from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from pixelify.core.colour import hex_to_rgb
from pixelify.core.compositor import composite, fit, load_image
from pixelify.core.pipeline import pixelate
from pixelify.core.types import DecodeError

WHITE = (255, 255, 255)
BLUE = (0, 0, 255)


class TestFit:
    def test_square_fills_canvas(self):
        p = fit(50, 50, 100)
        assert p.scale == 2.0
        assert (p.draw_width, p.draw_height) == (100.0, 100.0)
        assert (p.offset_x, p.offset_y) == (0.0, 0.0)

    def test_wide_image_letterboxed_vertically(self):
        p = fit(200, 100, 100)
        assert p.scale == 0.5
        assert (p.draw_width, p.draw_height) == (100.0, 50.0)
        assert (p.offset_x, p.offset_y) == (0.0, 25.0)

    def test_tall_image_letterboxed_horizontally(self):
        p = fit(100, 400, 100)
        assert p.scale == 0.25
        assert (p.draw_width, p.draw_height) == (25.0, 100.0)
        assert (p.offset_x, p.offset_y) == (37.5, 0.0)

    def test_aspect_preserved(self):
        for iw, ih in [(300, 120), (7, 13), (1000, 3), (640, 480)]:
            p = fit(iw, ih, 100)
            assert p.draw_width / p.draw_height == pytest.approx(iw / ih)
            assert max(p.draw_width, p.draw_height) == pytest.approx(100)

    def test_small_image_scaled_up(self):
        p = fit(2, 2, 100)
        assert p.scale == 50.0

    def test_zero_dimension_rejected(self):
        with pytest.raises(ValueError):
            fit(0, 10)


class TestComposite:
    def test_output_is_canvas_sized_rgb(self):
        out = composite(Image.new('RGB', (37, 91), (10, 20, 30)), canvas_size=100)
        assert out.size == (100, 100)
        assert out.mode == 'RGB'

    def test_wide_image_has_white_margins(self):
        out = composite(Image.new('RGB', (200, 100), BLUE))
        assert out.getpixel((50, 10)) == WHITE
        assert out.getpixel((50, 90)) == WHITE
        assert out.getpixel((50, 50)) == BLUE
        assert out.getpixel((0, 30)) == BLUE
        assert out.getpixel((99, 70)) == BLUE

    def test_tall_image_has_white_margins(self):
        out = composite(Image.new('RGB', (100, 400), BLUE))
        assert out.getpixel((10, 50)) == WHITE
        assert out.getpixel((90, 50)) == WHITE
        assert out.getpixel((50, 50)) == BLUE

    def test_custom_background(self):
        out = composite(Image.new('RGB', (200, 100), BLUE), background='#000000')
        assert out.getpixel((50, 5)) == (0, 0, 0)

    def test_transparent_image_shows_background(self):
        out = composite(Image.new('RGBA', (40, 40), (255, 0, 0, 0)))
        assert out.getpixel((50, 50)) == WHITE

    def test_opaque_rgba_kept(self):
        out = composite(Image.new('RGBA', (40, 40), (255, 0, 0, 255)))
        assert out.getpixel((50, 50)) == (255, 0, 0)

    def test_greyscale_input(self):
        out = composite(Image.new('L', (10, 10), 0))
        assert out.getpixel((50, 50)) == (0, 0, 0)

    def test_input_not_modified(self):
        img = Image.new('RGB', (200, 100), BLUE)
        composite(img)
        assert img.size == (200, 100)


class TestLoadImage:
    def test_loads_png_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / 'red.png'
        Image.new('RGB', (3, 2), (255, 0, 0)).save(path)
        img = load_image(str(path))
        assert img.size == (3, 2)

    def test_loads_from_file_object(self) -> None:
        buf = io.BytesIO()
        Image.new('RGB', (4, 4), (0, 255, 0)).save(buf, format='PNG')
        buf.seek(0)
        assert load_image(buf).size == (4, 4)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DecodeError):
            load_image(str(tmp_path / 'nope.png'))

    def test_garbage_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / 'bad.png'
        path.write_bytes(b'this is not an image')
        with pytest.raises(DecodeError):
            load_image(str(path))

    def test_truncated_png(self, tmp_path: Path) -> None:
        buf = io.BytesIO()
        Image.new('RGB', (64, 64), (1, 2, 3)).save(buf, format='PNG')
        path = tmp_path / 'cut.png'
        path.write_bytes(buf.getvalue()[:60])
        with pytest.raises(DecodeError):
            load_image(str(path))


class TestPasteEdges:
    def test_far_edge_reaches_canvas_border(self):
        # 100×101 spans x = 0.495 .. 99.505 on the canvas, so column 99 is image
        out = composite(Image.new('RGB', (100, 101), BLUE))
        assert out.getpixel((0, 50)) == BLUE
        assert out.getpixel((99, 50)) == BLUE

    def test_far_edge_sampled_at_high_n(self):
        out = composite(Image.new('RGB', (100, 101), BLUE))
        assert WHITE not in {out.getpixel((99, y)) for y in range(100)}

    def test_edges_match_real_extent(self):
        for iw, ih in [(100, 101), (101, 100), (97, 100), (300, 299), (7, 13)]:
            p = fit(iw, ih, 100)
            out = composite(Image.new('RGB', (iw, ih), BLUE))
            right = round(p.offset_x + p.draw_width) - 1
            bottom = round(p.offset_y + p.draw_height) - 1
            assert out.getpixel((right, bottom)) == BLUE
            assert out.getpixel((round(p.offset_x), round(p.offset_y))) == BLUE


class TestHighBitDepth:
    def test_16bit_png_scaled_to_8bit(self, tmp_path: Path) -> None:
        path = tmp_path / 'grey16.png'
        Image.fromarray(np.full((10, 10), 32768, dtype=np.uint16)).save(path)
        img = load_image(str(path))
        assert img.mode.startswith('I')
        out = composite(img)
        assert out.getpixel((50, 50)) == (128, 128, 128)

    def test_32bit_integer_mode(self):
        out = composite(Image.new('I', (10, 10), 65535))
        assert out.getpixel((50, 50)) == WHITE
        out = composite(Image.new('I', (10, 10), 0))
        assert out.getpixel((50, 50)) == (0, 0, 0)


class TestExifOrientation:
    def test_rotated_jpeg_is_uprighted(self, tmp_path: Path) -> None:
        # Stored 200×100, left half red, right half blue; orientation 6 = rotate 90° CW
        img = Image.new('RGB', (200, 100), BLUE)
        img.paste((255, 0, 0), (0, 0, 100, 100))
        exif = Image.Exif()
        exif[0x0112] = 6
        path = tmp_path / 'phone.jpg'
        img.save(path, exif=exif, quality=95)

        loaded = load_image(str(path))
        assert loaded.size == (100, 200)

        rows = pixelate(loaded, 4).rows()
        for row in rows:
            assert row[0] == '#ffffff'
            assert row[3] == '#ffffff'
        r, g, b = hex_to_rgb(rows[0][1])
        assert r > 200 and b < 60
        r, g, b = hex_to_rgb(rows[3][2])
        assert b > 200 and r < 60

    def test_no_exif_unchanged(self, tmp_path: Path) -> None:
        path = tmp_path / 'plain.png'
        Image.new('RGB', (200, 100), BLUE).save(path)
        assert load_image(str(path)).size == (200, 100)
