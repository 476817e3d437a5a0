# Reference colors, integer units: RGB 0-255, hue in degrees, other channels 0-100.

samples_hex_rgb = {
    "#ff0000": (255, 0, 0),
    "#00ff00": (0, 255, 0),
    "#0000ff": (0, 0, 255),
    "#ffff00": (255, 255, 0),
    "#00ffff": (0, 255, 255),
    "#ff00ff": (255, 0, 255),
    "#ffffff": (255, 255, 255),
    "#000000": (0, 0, 0),
    "#808080": (128, 128, 128),
    "#406273": (64, 98, 115),
    "#ff8000": (255, 128, 0),
    "#ff99cc": (255, 153, 204),
    "#800000": (128, 0, 0),
    "#0a0b0c": (10, 11, 12),
}

samples_rgb_hsl = {
    (255, 0, 0): (0, 100, 50),
    (0, 255, 0): (120, 100, 50),
    (0, 0, 255): (240, 100, 50),
    (255, 255, 0): (60, 100, 50),
    (0, 255, 255): (180, 100, 50),
    (255, 0, 255): (300, 100, 50),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (128, 128, 128): (0, 0, 50),
    (64, 98, 115): (200, 28, 35),
    (255, 128, 0): (30, 100, 50),
    (255, 153, 204): (330, 100, 80),
    (128, 0, 0): (0, 100, 25),
}

samples_rgb_hwb = {
    (255, 0, 0): (0, 0, 0),
    (0, 255, 0): (120, 0, 0),
    (0, 0, 255): (240, 0, 0),
    (255, 255, 255): (0, 100, 0),
    (0, 0, 0): (0, 0, 100),
    (128, 128, 128): (0, 50, 50),
    (64, 98, 115): (200, 25, 55),
    (255, 128, 0): (30, 0, 0),
    (255, 153, 204): (330, 60, 0),
}

samples_rgb_hsv = {
    (255, 0, 0): (0, 100, 100),
    (0, 255, 0): (120, 100, 100),
    (0, 0, 255): (240, 100, 100),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (128, 128, 128): (0, 0, 50),
    (64, 98, 115): (200, 44, 45),
    (255, 128, 0): (30, 100, 100),
    (255, 153, 204): (330, 40, 100),
}

samples_hsl_rgb = {
    (0, 100, 50): (255, 0, 0),
    (120, 100, 50): (0, 255, 0),
    (240, 100, 50): (0, 0, 255),
    (0, 0, 0): (0, 0, 0),
    (0, 0, 100): (255, 255, 255),
    (200, 28, 35): (64, 98, 114),
    (30, 100, 50): (255, 128, 0),
    (330, 100, 80): (255, 153, 204),
    (0, 100, 25): (128, 0, 0),
}

samples_hwb_rgb = {
    (0, 0, 0): (255, 0, 0),
    (120, 0, 0): (0, 255, 0),
    (0, 0, 100): (0, 0, 0),
    (0, 100, 0): (255, 255, 255),
    (0, 50, 50): (128, 128, 128),
    (200, 25, 55): (64, 98, 115),
    (330, 60, 0): (255, 153, 204),
    # whiteness + blackness above 100 normalizes to a gray
    (90, 80, 80): (128, 128, 128),
}

samples_hsv_rgb = {
    (0, 100, 100): (255, 0, 0),
    (120, 100, 100): (0, 255, 0),
    (240, 100, 100): (0, 0, 255),
    (0, 0, 0): (0, 0, 0),
    (0, 0, 100): (255, 255, 255),
    (0, 0, 50): (128, 128, 128),
    (200, 44, 45): (64, 98, 115),
    (330, 40, 100): (255, 153, 204),
}
