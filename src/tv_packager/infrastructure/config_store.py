"""Project-local persistence of the last-used platform metadata."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from tv_packager.application.fields import FieldDescriptor
from tv_packager.application.ports import InputProvider
from tv_packager.errors import CorruptStateError
from tv_packager.schemas import WebOSMetadata

logger = logging.getLogger(__name__)

PERSISTED_SCHEMAS: dict[str, type[BaseModel]] = {"webos": WebOSMetadata}

REUSE_FIELD = "useExisting"


class ConfigurationStore:
    """Read, validate and write the JSON state file keyed by platform name.

    Parameters
    ----------
    path : Path
        Location of the state file, e.g. ``platforms/userconf.json``.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> dict[str, Any] | None:
        """Return the parsed document, or ``None`` if the file does not exist.

        Raises
        ------
        CorruptStateError
            If the file is not a JSON object.
        """
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise CorruptStateError(f"Cannot parse {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise CorruptStateError(f"{self.path} must contain a JSON object.")
        return data

    def validate(self, platform_key: str, data: dict[str, Any] | None) -> BaseModel | None:
        """Return the stored metadata for ``platform_key`` if it is usable."""
        schema = PERSISTED_SCHEMAS.get(platform_key)
        if data is None or schema is None or platform_key not in data:
            return None
        try:
            return schema.model_validate(data[platform_key])
        except ValidationError as exc:
            logger.info(
                "Ignoring stored %s configuration in %s: %d invalid field(s)",
                platform_key,
                self.path,
                exc.error_count(),
            )
            return None

    def load_valid(self, platform_key: str) -> BaseModel | None:
        """Load the file and validate the entry for ``platform_key``."""
        return self.validate(platform_key, self.load())

    def decide_reuse(self, existing: BaseModel, provider: InputProvider) -> bool:
        """Show a summary of ``existing`` and ask whether to reuse it."""
        stored = existing.model_dump()
        summary = "\n".join(
            f"      > {key:<12}: {stored.get(key, '')}"
            for key in ("name", "version", "vendor")
        )
        logger.info("Stored information in %s:\n%s", self.path, summary)
        answers = provider.ask(
            [
                FieldDescriptor(
                    name=REUSE_FIELD,
                    message=(
                        f"[ Stored Information ]\n{summary}\n"
                        f"Already have '{self.path.name}', do you want to use this data?"
                    ),
                    kind="confirm",
                    default=True,
                )
            ]
        )
        return bool(answers.get(REUSE_FIELD))

    def persist(self, platform_key: str, metadata: BaseModel) -> None:
        """Replace the ``platform_key`` entry, keeping every other platform.

        The full document is rewritten with 2-space indentation through a
        temporary file and an atomic rename.
        """
        document = self.load() or {}
        document[platform_key] = metadata.model_dump(by_alias=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, self.path)
        logger.debug("Saved %s configuration to %s", platform_key, self.path)
