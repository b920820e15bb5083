# KDP trim sizes and common paper sizes (in inches). 72 points = 1 inch
# Presets are trusted constants; only custom dimensions are bounds-checked.

INCH = 72.0

# KDP custom trim bounds (inches, inclusive)
MIN_WIDTH = 4.0
MAX_WIDTH = 8.5
MIN_HEIGHT = 6.0
MAX_HEIGHT = 11.69

# Background colours per paper type
PAPER_COLORS = {
    "white": "#FFFFFF",
    "cream": "#F8F3E6",
}

CUSTOM_SIZE_NAME = "Custom"

KDP_SIZES = {
    # Paperback sizes
    "Paperback - 5 x 8": {"width": 5, "height": 8, "type": "paperback"},
    "Paperback - 5.06 x 7.81": {"width": 5.06, "height": 7.81, "type": "paperback"},
    "Paperback - 5.25 x 8": {"width": 5.25, "height": 8, "type": "paperback"},
    "Paperback - 5.5 x 8.5": {"width": 5.5, "height": 8.5, "type": "paperback"},
    "Paperback - 6 x 9": {"width": 6, "height": 9, "type": "paperback"},
    "Paperback - 6.14 x 9.21": {"width": 6.14, "height": 9.21, "type": "paperback"},
    "Paperback - 6.69 x 9.61": {"width": 6.69, "height": 9.61, "type": "paperback"},
    "Paperback - 7 x 10": {"width": 7, "height": 10, "type": "paperback"},
    "Paperback - 7.44 x 9.69": {"width": 7.44, "height": 9.69, "type": "paperback"},
    "Paperback - 7.5 x 9.25": {"width": 7.5, "height": 9.25, "type": "paperback"},
    "Paperback - 8 x 10": {"width": 8, "height": 10, "type": "paperback"},
    "Paperback - 8.25 x 6": {"width": 8.25, "height": 6, "type": "paperback"},
    "Paperback - 8.25 x 8.25": {"width": 8.25, "height": 8.25, "type": "paperback"},
    "Paperback - 8.5 x 8.5": {"width": 8.5, "height": 8.5, "type": "paperback"},
    "Paperback - 8.5 x 11": {"width": 8.5, "height": 11, "type": "paperback"},
    # Hardcover sizes
    "Hardcover - 5 x 8": {"width": 5, "height": 8, "type": "hardcover"},
    "Hardcover - 5.5 x 8.5": {"width": 5.5, "height": 8.5, "type": "hardcover"},
    "Hardcover - 6 x 9": {"width": 6, "height": 9, "type": "hardcover"},
    "Hardcover - 7 x 10": {"width": 7, "height": 10, "type": "hardcover"},
    "Hardcover - 8 x 10": {"width": 8, "height": 10, "type": "hardcover"},
    "Hardcover - 8.25 x 8.25": {"width": 8.25, "height": 8.25, "type": "hardcover"},
    "Hardcover - 8.5 x 8.5": {"width": 8.5, "height": 8.5, "type": "hardcover"},
    "Hardcover - 8.5 x 11": {"width": 8.5, "height": 11, "type": "hardcover"},
}

# Common non-KDP paper sizes; no book type
COMMON_SIZES = {
    "Letter": {"width": 8.5, "height": 11},
    "Legal": {"width": 8.5, "height": 14},
    "Tabloid": {"width": 11, "height": 17},
    "A4": {"width": 8.27, "height": 11.69},
    "A5": {"width": 5.83, "height": 8.27},
    "A3": {"width": 11.69, "height": 16.54},
}

# Named margin presets (inches): top, bottom, inside, outside
MARGIN_PRESETS = {
    "default": {"top": 1.0, "bottom": 1.0, "inside": 1.0, "outside": 1.0},
    "narrow": {"top": 0.5, "bottom": 0.5, "inside": 0.5, "outside": 0.5},
    "wide": {"top": 1.25, "bottom": 1.25, "inside": 1.25, "outside": 1.25},
    # Book-style: wider inside edge reserves binding space
    "mirrored": {"top": 1.0, "bottom": 1.0, "inside": 1.25, "outside": 0.75},
}

# Smallest margin the original dialog offered for custom input
MIN_SAFE_MARGIN = 0.25

SETTINGS_KEY = "kdpFormatterSettings"
