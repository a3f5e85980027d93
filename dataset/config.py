"""
Dataset location and raw JSON loading
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

from dataset.exceptions import DatasetError, DatasetNotFoundError

logger = logging.getLogger(__name__)

# Dataset path - can be configured via environment variable
DATASET_PATH = os.getenv('DATASET_PATH', str(Path(__file__).parent.parent / 'data' / 'flights.json'))


def resolve_dataset_path(location: Union[str, Path, None] = None) -> Path:
    """
    Resolve the dataset file location, failing fast if it does not exist
    """
    path = Path(location or DATASET_PATH).expanduser()
    if not path.is_file():
        logger.error("Flights dataset does not exist at location: %s", path)
        raise DatasetNotFoundError(str(path))

    logger.info("Configured flights dataset location: %s", path)
    return path


def read_dataset(location: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Read the raw dataset document ({"airports": [...], "flights": [...]})
    """
    path = resolve_dataset_path(location)
    try:
        with path.open('r', encoding='utf-8') as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Failed to parse dataset {path}: {e}") from e

    if not isinstance(document, dict):
        raise DatasetError(f"Dataset root must be a JSON object, got {type(document).__name__}")
    return document
