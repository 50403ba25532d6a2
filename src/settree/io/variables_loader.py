from __future__ import annotations

import logging
import os
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from settree.io.errors import LoaderError
from settree.io.file_spec import VariablesFileSpec
from settree.utils.logging import log_calls

logger = logging.getLogger(__name__)


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@log_calls()
def load_variables(path: str) -> VariablesFileSpec:
    """Load and validate a variables YAML file.

    An empty file yields an empty spec.

    Raises:
        LoaderError: If the file is missing, is not valid YAML, or does not
            match VariablesFileSpec.
    """
    if not os.path.isfile(path):
        raise LoaderError(path, "Variables file not found")
    try:
        data = _read_yaml(path)
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Invalid YAML", cause=exc) from exc
    try:
        spec = VariablesFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid variables definition", cause=exc) from exc
    logger.info(
        "Loaded %d variable(s) and %d template(s) from %s",
        len(spec.variables),
        len(spec.templates),
        path,
    )
    return spec


__all__ = ["load_variables"]
