"""Loader for field definition files (local YAML / JSON)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError
from ruamel.yaml import YAML

from simplecsv.exceptions import FieldDefinitionLoadError
from simplecsv.models import FieldDefinition

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class FieldDefinitionLoader:
    """
    Read a schema file and return its field definitions.

    Expected shape::

        fields:
          - name: active
            type: bool
            format: "Y,N"
            flags: 2
    """

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    @staticmethod
    def load(path: str | Path) -> list[FieldDefinition]:
        file_path = Path(path)

        # validation
        if not file_path.is_file():
            logger.error("Field definition file not found: %s", file_path)
            raise FieldDefinitionLoadError(f"File not found: {file_path}")

        suffix = file_path.suffix.lower()
        if suffix not in FieldDefinitionLoader.supported_exts:
            raise FieldDefinitionLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(FieldDefinitionLoader.supported_exts))}"
            )

        raw_text = file_path.read_text(encoding="utf-8")

        # parse
        try:
            if suffix in _YAML_EXTS:
                data: Any = _yaml_parser.load(raw_text)
            else:  # .json
                data = json.loads(raw_text)
        except Exception as exc:
            raise FieldDefinitionLoadError(
                f"Cannot parse {file_path.name}: {exc}"
            ) from exc

        if not isinstance(data, dict):
            raise FieldDefinitionLoadError("Top-level object must be a mapping")

        entries = data.get("fields")
        if not isinstance(entries, list):
            raise FieldDefinitionLoadError(
                f"{file_path.name}: 'fields' must be a list of field definitions"
            )

        definitions: list[FieldDefinition] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise FieldDefinitionLoadError(
                    f"{file_path.name}: fields[{index}] must be a mapping"
                )
            try:
                definitions.append(FieldDefinition.model_validate(entry))
            except ValidationError as exc:
                raise FieldDefinitionLoadError(
                    f"{file_path.name}: invalid fields[{index}]: {exc}"
                ) from exc

        logger.debug("Field definitions loaded (%d fields)", len(definitions))
        return definitions
