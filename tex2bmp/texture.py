# TEX texture parser
#
#   0x00  8      ignored
#   0x08  s32    width
#   0x0C  s32    height
#   0x10  8      ignored (header is 24 bytes)
#   0x18  w*h/2  4bpp pixel indices, low nibble first
#   end-32 32    16x RGB555 palette entries
#
# All values are little endian.
#

import os
import struct
import logging
from collections import namedtuple

from .color import DECODE_RGB555
from .errors import OpenError, TexFormatError, InvalidDimensions, TruncatedData, TruncatedPalette

_log = logging.getLogger("tex2bmp")

WIDTH_OFFSET = 0x08
HEIGHT_OFFSET = 0x0C
HEADER_SIZE = 24
PALETTE_ENTRIES = 16
PALETTE_SIZE = PALETTE_ENTRIES * 2
MAX_DIMENSION = 4096


class Texture(namedtuple("Texture", "width height indices palette")):
    __slots__ = ()

    def index_at(self, x, y):
        # odd pixel counts lose their last nibble; it reads as the transparency key
        i = y * self.width + x
        if i < len(self.indices):
            return self.indices[i]
        return 0


# ===============================
# Util
# ===============================

def READ_I32(f, offset):
    f.seek(offset)
    b = f.read(4)
    if len(b) != 4:
        raise TruncatedData(f"expected 4 bytes at offset 0x{offset:X}, got {len(b)}")
    return struct.unpack("<i", b)[0]


def READ_U16(f):
    b = f.read(2)
    if len(b) != 2:
        raise TruncatedPalette(f"palette entry cut short at offset 0x{f.tell():X}")
    return struct.unpack("<H", b)[0]


def STREAM_SIZE(f):
    pos = f.tell()
    size = f.seek(0, os.SEEK_END)
    f.seek(pos)
    return size


def UNPACK_NIBBLES(raw):
    indices = bytearray()
    for b in raw:
        indices.append(b & 0x0F)
        indices.append((b >> 4) & 0x0F)
    return indices


# ===============================
# Parser
# ===============================

def PARSE_TEXTURE(f):
    size = STREAM_SIZE(f)
    if size < PALETTE_SIZE:
        raise TruncatedPalette(f"file is {size} bytes, too small to hold a {PALETTE_SIZE} byte palette")

    width = READ_I32(f, WIDTH_OFFSET)
    height = READ_I32(f, HEIGHT_OFFSET)
    if width <= 0 or height <= 0 or width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise InvalidDimensions(f"invalid dimensions {width}x{height} in header")

    data_size = (width * height) // 2

    f.seek(HEADER_SIZE)
    raw = f.read(data_size)
    if len(raw) != data_size:
        raise TruncatedData(f"expected {data_size} bytes of pixel data, got {len(raw)}")

    palette_ofs = size - PALETTE_SIZE
    if HEADER_SIZE + data_size > palette_ofs:
        raise TruncatedPalette(
            f"pixel data ends at 0x{HEADER_SIZE + data_size:X}, "
            f"past the palette at 0x{palette_ofs:X}"
        )

    f.seek(palette_ofs)
    palette = [DECODE_RGB555(READ_U16(f)) for _ in range(PALETTE_ENTRIES)]

    _log.debug("size=%d width=%d height=%d data=%d palette@0x%X", size, width, height, data_size, palette_ofs)
    _log.debug("palette: %s", palette)

    return Texture(width, height, UNPACK_NIBBLES(raw), palette)


def READ_TEXTURE(tex_path):
    try:
        f = open(tex_path, "rb")
    except OSError as e:
        raise OpenError(f"could not open file ({e.strerror})", tex_path) from e

    with f:
        try:
            return PARSE_TEXTURE(f)
        except TexFormatError as e:
            e.path = tex_path
            raise
        except OSError as e:
            raise OpenError(f"could not read file ({e.strerror})", tex_path) from e
