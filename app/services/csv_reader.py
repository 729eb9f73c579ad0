# app/services/csv_reader.py
#
# CSV Reader
# Loads one resource file from the data folder and returns its rows as
# plain dicts (column name -> string value), in file order.

import math
import warnings
from pathlib import Path
from typing import Dict, List

import pandas as pd

from app.errors import CsvReadError, ErrorKind

Record = Dict[str, str]


# ---- Path handling ----

def resolve_data_path(filename: str, data_dir: Path) -> Path:
    """
    Resolve `filename` inside `data_dir`.

    Only bare names / relative paths that stay inside the data folder are allowed;
    anything else is reported as not found rather than read.
    """
    base = Path(data_dir).resolve()
    candidate = Path(filename)

    if candidate.is_absolute() or ".." in candidate.parts:
        raise CsvReadError(ErrorKind.NOT_FOUND, filename, f"File not found: {filename}")

    path = (base / candidate).resolve()
    if base not in path.parents:
        raise CsvReadError(ErrorKind.NOT_FOUND, filename, f"File not found: {filename}")

    return path


# ---- Reading ----

def read_csv_records(filename: str, data_dir: Path) -> List[Record]:
    """
    Read `filename` from `data_dir` into a list of records.

    - every cell is kept as a string (no number/date inference, empty stays "")
    - keys of each record are exactly the header columns
    - a header-only file gives []

    Raises CsvReadError with:
        NOT_FOUND   file missing (or outside data_dir)
        PERMISSION  file not readable
        PARSE       empty file, bad encoding, or a row whose field count
                    does not match the header
        IO          any other OS-level failure
    """
    path = resolve_data_path(filename, data_dir)

    try:
        # header=None: the header row comes back as plain data, so pandas neither
        # renames columns (id.1, Unnamed: 1) nor turns a column into an index.
        # python engine: rows longer than the header raise, short rows come back as None
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                path,
                header=None,
                dtype=object,
                na_filter=False,
                encoding="utf-8-sig",
                engine="python",
                on_bad_lines="error",
            )
    except FileNotFoundError:
        raise CsvReadError(ErrorKind.NOT_FOUND, filename, f"File not found: {filename}")
    except PermissionError:
        raise CsvReadError(ErrorKind.PERMISSION, filename, f"Permission denied: {filename}")
    except pd.errors.EmptyDataError:
        raise CsvReadError(ErrorKind.PARSE, filename, f"{filename}: file is empty")
    except (pd.errors.ParserError, pd.errors.ParserWarning) as e:
        raise CsvReadError(ErrorKind.PARSE, filename, f"{filename}: {e}")
    except UnicodeDecodeError as e:
        raise CsvReadError(ErrorKind.PARSE, filename, f"{filename}: not valid UTF-8 ({e.reason})")
    except OSError as e:
        raise CsvReadError(ErrorKind.IO, filename, f"{filename}: {e.strerror or e}")

    rows = df.values.tolist()
    if not rows:
        raise CsvReadError(ErrorKind.PARSE, filename, f"{filename}: file is empty")

    header = rows[0]
    body = rows[1:]

    if any(_missing(name) or str(name).strip() == "" for name in header):
        raise CsvReadError(ErrorKind.PARSE, filename, f"{filename}: header has an empty column name")

    header = [str(name) for name in header]
    duplicates = sorted({name for name in header if header.count(name) > 1})
    if duplicates:
        raise CsvReadError(
            ErrorKind.PARSE,
            filename,
            f"{filename}: duplicate column names in header: {', '.join(duplicates)}",
        )

    for row_no, row in enumerate(body, start=1):
        if len(row) != len(header) or any(_missing(value) for value in row):
            raise CsvReadError(
                ErrorKind.PARSE,
                filename,
                f"{filename}: row {row_no} has fewer fields than the header ({len(header)})",
            )

    return [dict(zip(header, (str(value) for value in row))) for row in body]


def _missing(value) -> bool:
    # padding pandas adds for fields a row does not have
    return value is None or (isinstance(value, float) and math.isnan(value))
