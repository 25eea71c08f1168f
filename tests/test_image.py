import pytest

from raycub.errors import ErrorCode, MlxError
from raycub.image import Image, Instance, Texture, texture_to_image


def _pattern_texture(width, height):
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data += bytes([x, y, x + y, 0xFF])
    return Texture(width, height, data)


def test_new_image_is_zeroed():
    img = Image(3, 2)
    assert len(img.pixels) == 3 * 2 * 4
    assert set(img.pixels) == {0}
    assert img.enabled is True
    assert img.instances == []


@pytest.mark.parametrize("dims", [(0, 5), (5, 0), (32768, 1), (1, 32768)])
def test_invalid_dimensions(dims):
    with pytest.raises(MlxError) as info:
        Image(*dims)
    assert info.value.code == ErrorCode.INVDIM


def test_put_pixel_byte_layout():
    img = Image(2, 2)
    img.put_pixel(1, 0, 0x11223344)
    assert img.pixels[4:8] == bytes([0x11, 0x22, 0x33, 0x44])


def test_put_get_round_trip():
    img = Image(4, 4)
    img.put_pixel(3, 2, 0xDEADBEEF)
    assert img.get_pixel(3, 2) == 0xDEADBEEF
    assert img.get_pixel(2, 3) == 0


@pytest.mark.parametrize("pos", [(4, 0), (0, 4), (-1, 0)])
def test_put_pixel_out_of_bounds(pos):
    img = Image(4, 4)
    with pytest.raises(MlxError) as info:
        img.put_pixel(*pos, 0xFF)
    assert info.value.code == ErrorCode.INVPOS


def test_fill():
    img = Image(3, 3)
    img.fill(0x000000FF)
    assert all(img.get_pixel(x, y) == 0x000000FF for x in range(3) for y in range(3))


def test_resize_upscale_nearest():
    img = Image(2, 2)
    img.put_pixel(0, 0, 0x10)
    img.put_pixel(1, 0, 0x20)
    img.put_pixel(0, 1, 0x30)
    img.put_pixel(1, 1, 0x40)
    img.resize(4, 4)
    assert (img.width, img.height) == (4, 4)
    assert len(img.pixels) == 4 * 4 * 4
    assert img.get_pixel(0, 0) == 0x10
    assert img.get_pixel(1, 1) == 0x10
    assert img.get_pixel(3, 0) == 0x20
    assert img.get_pixel(0, 3) == 0x30
    assert img.get_pixel(3, 3) == 0x40


def test_resize_downscale_samples_origin_grid():
    img = Image(4, 4)
    for x in range(4):
        for y in range(4):
            img.put_pixel(x, y, (x << 8) | y)
    img.resize(2, 2)
    assert img.get_pixel(0, 0) == (0 << 8) | 0
    assert img.get_pixel(1, 1) == (2 << 8) | 2


def test_resize_same_size_keeps_pixels():
    img = Image(2, 2)
    img.put_pixel(1, 1, 0xABCDEF01)
    img.resize(2, 2)
    assert img.get_pixel(1, 1) == 0xABCDEF01


def test_resize_invalid():
    img = Image(2, 2)
    with pytest.raises(MlxError) as info:
        img.resize(0, 2)
    assert info.value.code == ErrorCode.INVDIM
    assert (img.width, img.height) == (2, 2)


def test_add_instance_indices():
    img = Image(1, 1)
    assert img.add_instance(5, 6, 0) == 0
    assert img.add_instance(7, 8, 1) == 1
    assert img.instances[1] == Instance(7, 8, 1, True)


def test_set_instance_depth():
    img = Image(1, 1)
    index = img.add_instance(0, 0, 3)
    assert img.set_instance_depth(index, 3) is False
    assert img.set_instance_depth(index, 9) is True
    assert img.instances[index].z == 9


def test_images_compare_by_identity():
    first = Image(1, 1)
    second = Image(1, 1)
    assert first == first
    assert first != second


def test_texture_get_pixel():
    tex = _pattern_texture(3, 2)
    assert tex.get_pixel(2, 1) == int.from_bytes(bytes([2, 1, 3, 0xFF]), "big")


def test_texture_bad_buffer():
    with pytest.raises(ValueError):
        Texture(2, 2, bytearray(3))


def test_texture_get_pixel_out_of_bounds():
    tex = _pattern_texture(2, 2)
    with pytest.raises(MlxError) as info:
        tex.get_pixel(2, 0)
    assert info.value.code == ErrorCode.INVPOS


def test_texture_to_image_round_trip():
    tex = _pattern_texture(5, 3)
    img = texture_to_image(tex)
    assert (img.width, img.height) == (5, 3)
    assert img.pixels == tex.pixels
    assert all(
        img.get_pixel(x, y) == tex.get_pixel(x, y) for x in range(5) for y in range(3)
    )


def test_texture_to_image_rejects_empty():
    with pytest.raises(MlxError) as info:
        texture_to_image(Texture(0, 0, bytearray()))
    assert info.value.code == ErrorCode.INVDIM