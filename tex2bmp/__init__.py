# TEX to BMP converter
#
# Decodes 4bpp paletted TEX textures (RGB555 palette, swapped nibbles)
# into 24-bit BMP files.
#

from .color import DECODE_RGB555, SCALE_5_TO_8
from .texture import Texture, PARSE_TEXTURE, READ_TEXTURE, UNPACK_NIBBLES
from .bitmap import BUILD_BMP_HEADER, ENCODE_BITMAP, WRITE_BITMAP, TRANSPARENT_KEY
from .preview import TO_IMAGE
from .errors import (
    TexError,
    TexFormatError,
    OpenError,
    InvalidDimensions,
    TruncatedData,
    TruncatedPalette,
    WriteError,
)

__version__ = "1.0.0"
