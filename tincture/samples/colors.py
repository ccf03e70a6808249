import numpy as np
# Reference anchors: 8-bit RGB → float32 HSV

# RED (0.6 value)
DARK_RED_INT_RGB = (0x99, 0x00, 0x00)
DARK_RED_FLOAT_HSV = np.array([0.0, 1.0, 0.6], dtype=np.float32)

# GREEN (0.6 value)
DARK_GREEN_INT_RGB = (0x00, 0x99, 0x00)
DARK_GREEN_FLOAT_HSV = np.array([120.0, 1.0, 0.6], dtype=np.float32)

# BLUE (0.6 value)
DARK_BLUE_INT_RGB = (0x00, 0x00, 0x99)
DARK_BLUE_FLOAT_HSV = np.array([240.0, 1.0, 0.6], dtype=np.float32)

# YELLOW
YELLOW_INT_RGB = (0xFF, 0xFF, 0x00)
YELLOW_FLOAT_HSV = np.array([60.0, 1.0, 1.0], dtype=np.float32)

# CYAN
CYAN_INT_RGB = (0x00, 0xFF, 0xFF)
CYAN_FLOAT_HSV = np.array([180.0, 1.0, 1.0], dtype=np.float32)

# MAGENTA
MAGENTA_INT_RGB = (0xFF, 0x00, 0xFF)
MAGENTA_FLOAT_HSV = np.array([300.0, 1.0, 1.0], dtype=np.float32)

# WHITE
WHITE_INT_RGB = (0xFF, 0xFF, 0xFF)
WHITE_FLOAT_HSV = np.array([0.0, 0.0, 1.0], dtype=np.float32)

# BLACK
BLACK_INT_RGB = (0x00, 0x00, 0x00)
BLACK_FLOAT_HSV = np.array([0.0, 0.0, 0.0], dtype=np.float32)

# ORANGE (hue between red and yellow)
ORANGE_INT_RGB = (0xFF, 0x80, 0x00)
ORANGE_FLOAT_HSV = np.array([30.117647, 1.0, 1.0], dtype=np.float32)

# ROSE (red max, blue above green → hue wraps below 360)
ROSE_INT_RGB = (0xFF, 0x00, 0x80)
ROSE_FLOAT_HSV = np.array([329.88235, 1.0, 1.0], dtype=np.float32)

samples_rgb_hsv = {
    DARK_RED_INT_RGB: DARK_RED_FLOAT_HSV,
    DARK_GREEN_INT_RGB: DARK_GREEN_FLOAT_HSV,
    DARK_BLUE_INT_RGB: DARK_BLUE_FLOAT_HSV,
    YELLOW_INT_RGB: YELLOW_FLOAT_HSV,
    CYAN_INT_RGB: CYAN_FLOAT_HSV,
    MAGENTA_INT_RGB: MAGENTA_FLOAT_HSV,
    WHITE_INT_RGB: WHITE_FLOAT_HSV,
    BLACK_INT_RGB: BLACK_FLOAT_HSV,
    ORANGE_INT_RGB: ORANGE_FLOAT_HSV,
    ROSE_INT_RGB: ROSE_FLOAT_HSV,
}
