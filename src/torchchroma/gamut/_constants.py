"""ITU-R BT.601 constants for 8-bit YCbCr."""

from typing import Final

# Zero-chroma offset (not 127.5)
SHIFT: Final[float] = 128.0

# BT.601 table 1 luma coefficients
KB: Final[float] = 0.114
KR: Final[float] = 0.299

# 2 * (1 - kb), 2 * (1 - kr)
KB2: Final[float] = 1.772
KR2: Final[float] = 1.402

# Green contributions of Cb and Cr:
# 2 * (1 - kb) * kb / (1 - kb - kr), 2 * (1 - kr) * kr / (1 - kb - kr)
KB3: Final[float] = 0.3441363
KR3: Final[float] = 0.71413636

RGB_MIN: Final[float] = 0.0
RGB_MAX: Final[float] = 255.0
