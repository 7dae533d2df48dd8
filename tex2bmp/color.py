# ===============================
# RGB555 Palette Decoder
# ===============================
#
#   bit 15      unused
#   bits 14-10  red
#   bits 9-5    green
#   bits 4-0    blue
#


def SCALE_5_TO_8(v):
    return (v * 255) // 31


def DECODE_RGB555(c):
    c &= 0xFFFF
    r = (c >> 10) & 0x1F
    g = (c >> 5) & 0x1F
    b = c & 0x1F
    return (SCALE_5_TO_8(r), SCALE_5_TO_8(g), SCALE_5_TO_8(b))
