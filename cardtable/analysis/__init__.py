from cardtable.analysis.shuffle import (
    ShuffleReport,
    fisher_yates,
    table_shuffle,
    position_frequencies,
    uniformity_test,
)

__all__ = [
    "ShuffleReport",
    "fisher_yates",
    "position_frequencies",
    "table_shuffle",
    "uniformity_test",
]
