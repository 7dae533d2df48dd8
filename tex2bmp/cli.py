# TEX to BMP command line
#
# Usage:
#   pip install .
#   tex2bmp file1.tex [file2.tex ...]
#
# or drag and drop .tex files onto the script. Each file is written next to
# its source with a .bmp extension; a bad file is reported and skipped.
#
# Environment:
#   TEX2BMP_DEBUG=1   verbose logging
#   TEX2BMP_PAUSE=1   wait for ENTER before exiting
#

import os
import sys
import logging

from .texture import READ_TEXTURE
from .bitmap import ENCODE_BITMAP, WRITE_BITMAP
from .errors import TexError, WriteError

_log = logging.getLogger("tex2bmp")

BANNER = "--- TEX to BMP (Swapped Nibbles / RGB555) ---"
SEPARATOR = "-" * 45
USAGE = "Usage: Drag and drop .TEX files onto this executable."


def ENV_FLAG(name):
    return os.environ.get(name, "") == "1"


def OUTPUT_PATH(tex_path):
    return os.path.splitext(tex_path)[0] + ".bmp"


def CONVERT_FILE(tex_path):
    print(f"Processing: {tex_path}...")

    out_path = OUTPUT_PATH(tex_path)
    if os.path.abspath(out_path) == os.path.abspath(tex_path):
        raise WriteError("output would overwrite the source file", out_path)

    tex = READ_TEXTURE(tex_path)
    print(f" - Dimensions: {tex.width}x{tex.height}")

    data = ENCODE_BITMAP(tex.width, tex.height, tex.indices, tex.palette)
    WRITE_BITMAP(out_path, data)

    print(f"Success! Saved: {out_path}")
    return out_path


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    print(BANNER)

    failed = 0
    if not argv:
        print(USAGE)
    else:
        for tex_path in argv:
            try:
                CONVERT_FILE(tex_path)
            except TexError as e:
                failed += 1
                print(f"Error: {e}", file=sys.stderr)
                _log.debug("conversion of %s failed", tex_path, exc_info=True)
            print(SEPARATOR)

    if ENV_FLAG("TEX2BMP_PAUSE"):
        print("\nPress ENTER to exit...", end="", flush=True)
        sys.stdin.readline()

    return 1 if failed else 0


def run():
    logging.basicConfig(
        level=logging.DEBUG if ENV_FLAG("TEX2BMP_DEBUG") else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    sys.exit(main())


if __name__ == "__main__":
    run()
