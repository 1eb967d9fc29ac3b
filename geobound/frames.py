import logging

import polars as pl

from geobound import defaults
from geobound.bound import Bound
from geobound.logging import log_action
from geobound.types import Point

logger = logging.getLogger(__name__)


def filter_by_bound(
    lf: pl.LazyFrame,
    bound: Bound,
    x_col: str = defaults.X_COLUMN,
    y_col: str = defaults.Y_COLUMN,
) -> pl.LazyFrame:
    """Filter a LazyFrame to rows within a bound.

    Rows on the boundary are kept, matching `Bound.contains`. A malformed
    (empty) bound keeps nothing.

    Args:
        lf: The LazyFrame to filter.
        bound: Bound to filter records by.
        x_col: Name of the longitude column.
        y_col: Name of the latitude column.

    Returns:
        A LazyFrame filtered to rows with non-null coordinates within the bound.
    """
    return lf.filter(
        pl.col(x_col).is_not_null()
        & pl.col(y_col).is_not_null()
        & pl.col(y_col).is_between(bound.bottom, bound.top)
        & pl.col(x_col).is_between(bound.left, bound.right)
    )


def bound_of_frame(
    lf: pl.LazyFrame,
    x_col: str = defaults.X_COLUMN,
    y_col: str = defaults.Y_COLUMN,
) -> Bound:
    """
    Compute the bound of every coordinate pair in a LazyFrame.

    Rows missing either coordinate are ignored.

    Raises:
        ValueError: If no row has both coordinates.
    """
    df = log_action(
        "Computing bound of coordinates",
        lambda: lf.drop_nulls([x_col, y_col])
        .select(
            pl.col(x_col).min().alias("min_x"),
            pl.col(y_col).min().alias("min_y"),
            pl.col(x_col).max().alias("max_x"),
            pl.col(y_col).max().alias("max_y"),
        )
        .collect(),
    )

    min_x, min_y, max_x, max_y = df.row(0)
    if min_x is None:
        raise ValueError(f"No rows with both {x_col} and {y_col} to bound")

    bound = Bound(Point(min_x, min_y), Point(max_x, max_y))
    logger.info(f"Bound of coordinates: {bound}")
    return bound
