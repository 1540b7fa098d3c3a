"""Data preparation for export."""

import logging
import os
from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from ..core.constants import FileConstants
from ..core.models import ReviewRecord
from .report import format_score

logger = logging.getLogger(__name__)


def prepare_export(reviews: Sequence[ReviewRecord]) -> pd.DataFrame:
    """One row per review, in corpus order."""
    review_col, score_col, sentiment_col = FileConstants.CSV_COLUMNS
    rows = [
        {
            review_col: review.text,
            score_col: format_score(review.score),
            sentiment_col: review.sentiment.value,
        }
        for review in reviews
    ]
    return pd.DataFrame(rows, columns=FileConstants.CSV_COLUMNS)


def export_to_csv(reviews: Sequence[ReviewRecord], filename: Union[str, Path]) -> Path:
    """Write the whole corpus to a CSV file in one go.
    
    The table is written to a temporary sibling first and renamed over the
    target, so a failed write never leaves a partial file behind.
    """
    path = Path(filename)
    tmp_path = path.with_name(path.name + FileConstants.TEMP_SUFFIX)
    
    df = prepare_export(reviews)
    try:
        df.to_csv(tmp_path, index=False, sep=FileConstants.CSV_DELIMITER, encoding="utf-8")
        os.replace(tmp_path, path)
    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
    
    logger.info(f"Wrote {len(df)} reviews to {path}")
    return path
