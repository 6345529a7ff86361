"""
Device-side storage for aircraft fields the backend does not carry
(photo, category, address, ...). One JSON object keyed by aircraft id.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict
from models.aircraft import LOCAL_ONLY_FIELDS

logger = logging.getLogger(__name__)

LocalDataMap = Dict[str, Dict[str, Any]]


def extract_local_data(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Local-only fields present (not None) in an aircraft payload"""
    return {k: fields[k] for k in LOCAL_ONLY_FIELDS if fields.get(k) is not None}


class LocalAircraftStorage:
    def __init__(self, path: str):
        self.path = Path(path)

    def load(self) -> LocalDataMap:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading local aircraft data: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: LocalDataMap):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            logger.debug("Local aircraft data saved")
        except OSError as e:
            logger.warning(f"Error saving local aircraft data: {e}")
