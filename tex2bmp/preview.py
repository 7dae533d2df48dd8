# Pillow view of a decoded texture
#
# Unlike the BMP writer this keeps the real channel order and gives
# palette index 0 a zero alpha, so it can be shown or saved as PNG.
#

from PIL import Image


def TO_IMAGE(texture):
    pixels = []
    for y in range(texture.height):
        for x in range(texture.width):
            idx = texture.index_at(x, y)
            if idx == 0:
                pixels.append((0, 0, 0, 0))
            else:
                pixels.append(texture.palette[idx] + (255,))

    img = Image.new("RGBA", (texture.width, texture.height))
    img.putdata(pixels)
    return img
