import logging
from datetime import datetime
from pathlib import Path
import pandas as pd

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def load_csv(file_path: Path, **read_options) -> pd.DataFrame | None:
    """
    CSV loader with an encoding fallback.
    Tries UTF-8 with BOM support ('utf-8-sig') first, then latin-1.
    Returns None (and logs why) when the file can't be read.
    Extra keyword arguments are passed straight to pandas.read_csv.
    """
    try:
        return pd.read_csv(file_path, encoding="utf-8-sig", **read_options)

    except UnicodeDecodeError:
        logger.info(f"UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'.")
        try:
            return pd.read_csv(file_path, encoding="latin-1", **read_options)
        except (OSError, ValueError) as e_latin1:
            logger.error(
                f"Could not read {file_path.name} even with latin-1. Reason: {e_latin1}"
            )
            return None

    except FileNotFoundError:
        logger.info(f"Seed file not found at {file_path}, skipping.")
        return None

    except (OSError, ValueError) as e_general:
        # pandas parser and empty-file errors are ValueError subclasses
        logger.error(
            f"An unexpected error occurred while reading {file_path.name}. Reason: {e_general}"
        )
        return None
