import struct

import pytest


def build_tex(width, height, packed=b"", palette=None, pad=b""):
    # 8 ignored bytes, width, height, 8 ignored bytes, pixel data, palette
    if palette is None:
        palette = [0] * 16
    head = b"\xAA" * 8 + struct.pack("<ii", width, height) + b"\x55" * 8
    pal = struct.pack("<16H", *palette) if palette else b""
    return head + bytes(packed) + pad + pal


@pytest.fixture
def make_tex():
    return build_tex


@pytest.fixture
def write_tex(tmp_path):
    def _write(name, data):
        p = tmp_path / name
        p.write_bytes(data)
        return p
    return _write
