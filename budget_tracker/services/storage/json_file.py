"""
JSON File Key-Value Store

All keys live in one JSON object on disk: {"<key>": "<value text>", ...}.
This mirrors browser local storage, where every value is an opaque string.

TRADEOFFS:
- Every set rewrites the whole file (fine for a personal ledger)
- Single writer only; two processes sharing a file is out of scope

Writes go to a temp file in the same directory and are moved into place
with os.replace, so a crash never leaves a half-written file behind.
Transient OSErrors are retried.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from budget_tracker.logger import get_logger
from budget_tracker.services.storage.interface import KeyValueStore, StorageError


logger = get_logger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """File-backed store with atomic whole-file writes."""

    def __init__(
        self,
        path: Union[str, Path],
        retry_attempts: int = 3,
    ):
        self._path = Path(path)
        self._retry_attempts = retry_attempts

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Failed to read {self._path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self._path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"Value under '{key}' is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError as e:
            # The other keys are already unreadable; start a fresh file
            logger.warning("store_file_reset", path=str(self._path), error=str(e))
            data = {}
        data[key] = value
        content = json.dumps(data, indent=2, ensure_ascii=False)

        for attempt in Retrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        ):
            with attempt:
                self._atomic_write(content)

    def _atomic_write(self, content: str) -> None:
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)

        temp_name: Optional[str] = None
        try:
            # Temp file in the target directory keeps os.replace on one filesystem
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=directory,
                prefix=self._path.name + "-",
                suffix=".tmp",
                delete=False,
            ) as tf:
                temp_name = tf.name
                tf.write(content)
                tf.flush()
                os.fsync(tf.fileno())
            os.replace(temp_name, self._path)
        except OSError:
            if temp_name and os.path.exists(temp_name):
                os.unlink(temp_name)
            raise
