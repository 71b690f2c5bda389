"""Saving downloaded statements to disk."""

import shutil
from pathlib import Path
from typing import Union

from n26.client import Client
from n26.errors import FilesystemError
from n26.logger import get_logger
from n26.models import Timestamp

logger = get_logger("n26.export")

SMART_STATEMENT_FILENAME = "smrt_statement.csv"


def save_statement_pdf(client: Client, statement_id: str, directory: Union[str, Path] = ".") -> Path:
    """Download a monthly statement and write it as <statement_id>.pdf."""
    body = client.get_statement_pdf(statement_id)
    output_path = Path(directory) / f"{statement_id}.pdf"

    try:
        output_path.write_bytes(body)
    except OSError as e:
        raise FilesystemError(f"Could not write {output_path}: {e}") from e

    logger.info(f"Saved statement {statement_id} to {output_path}")
    return output_path


def save_smart_statement_csv(client: Client, from_: Timestamp, to: Timestamp,
                             directory: Union[str, Path] = ".",
                             filename: str = SMART_STATEMENT_FILENAME) -> Path:
    """Stream the CSV transaction report for a window straight to disk."""
    output_path = Path(directory) / filename

    def write(body) -> int:
        try:
            with open(output_path, "wb") as csvfile:
                shutil.copyfileobj(body, csvfile)
                return csvfile.tell()
        except OSError as e:
            raise FilesystemError(f"Could not write {output_path}: {e}") from e

    size = client.get_smart_statement_csv(from_, to, write)
    logger.info(f"Saved {size} bytes of transactions to {output_path}")
    return output_path
