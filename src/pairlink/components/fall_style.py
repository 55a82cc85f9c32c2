from enum import Enum


class FallStyle(Enum):
    """Post-removal compaction pattern."""
    NONE = "none"
    DOWN = "down"
    UP = "up"
    LEFT = "left"
    RIGHT = "right"
    SPLIT_LEFT_RIGHT = "split-left-right"
    SPLIT_UP_DOWN = "split-up-down"
    CENTER = "center"


# Display names shown in endless mode, where the style replaces the level title.
FALL_STYLE_NAMES = {
    FallStyle.NONE: "Warm-up",
    FallStyle.DOWN: "Gravity",
    FallStyle.UP: "Sky City",
    FallStyle.LEFT: "Heart's Pull",
    FallStyle.RIGHT: "Right-hand Rule",
    FallStyle.SPLIT_LEFT_RIGHT: "Split Sides",
    FallStyle.SPLIT_UP_DOWN: "Repelling Poles",
    FallStyle.CENTER: "Ultimate Pairs",
}
