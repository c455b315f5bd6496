from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
import pandas as pd

from .errors import EmptyInput, InputNotFound, ParseError, ShapeMismatch

logger = logging.getLogger(__name__)


def _first_bad_token(tokens: list[str]) -> str:
    for tok in tokens:
        try:
            if math.isfinite(float(tok)):
                continue
        except ValueError:
            pass
        return tok
    return tokens[0]


def load_scan_table(path: Path, probe_count: int) -> np.ndarray:
    """Read a whitespace-delimited scan file into an R x N float array.

    One non-blank line per scan row. Numbers use a period as the decimal
    separator regardless of locale. Every row must carry exactly
    ``probe_count`` values; the first offending line aborts the load.
    """
    path = Path(path)
    if not path.is_file():
        raise InputNotFound(path)

    rows: list[np.ndarray] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            tokens = line.split()
            if not tokens:
                continue
            try:
                values = np.array(tokens, dtype=float)
            except ValueError:
                raise ParseError(_first_bad_token(tokens), lineno, path) from None
            if not np.isfinite(values).all():
                raise ParseError(_first_bad_token(tokens), lineno, path)
            if values.size != probe_count:
                raise ShapeMismatch(probe_count, values.size, line=lineno)
            rows.append(values)

    if not rows:
        raise EmptyInput(f"no data in {path}")
    table = np.vstack(rows)
    logger.info("Loaded %d rows x %d cols from %s", table.shape[0], table.shape[1], path)
    return table


def corrected_path(in_path: Path, suffix: str = "_corrected", ext: str = ".csv") -> Path:
    """Sibling of ``in_path``: same folder, ``<stem><suffix><ext>``."""
    in_path = Path(in_path)
    return in_path.with_name(f"{in_path.stem}{suffix}{ext}")


def write_corrected(
    table,
    in_path: Path,
    *,
    suffix: str = "_corrected",
    ext: str = ".csv",
    sig_digits: int = 5,
) -> Path:
    """Write ``table`` space separated, ``sig_digits`` significant digits per value."""
    out = corrected_path(in_path, suffix=suffix, ext=ext)
    out.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(np.asarray(table, dtype=float)).to_csv(
        out,
        sep=" ",
        header=False,
        index=False,
        float_format=f"%.{int(sig_digits)}G",
        lineterminator="\n",
    )
    logger.info("Saved corrected file -> %s", out)
    return out
