from kdp_page_setup.config.sizes import INCH

POINTS_PER_INCH = INCH


def to_points(inches: float) -> float:
    return inches * POINTS_PER_INCH


def to_inches(points: float) -> float:
    return points / POINTS_PER_INCH
