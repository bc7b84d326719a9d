"""
Preflight validation for host parameter layers.

This script performs semantic validation before a layer is merged:
- Validates every set field has the type the registry declares
- Validates integer fields lie within their registry bounds
- Returns error if the layer is invalid, allowing the caller to fail fast

Unset fields are always valid. Values are never rewritten here.
"""

import logging
import os
from datetime import timedelta
from pathlib import Path

from ssh_config.parameter_registry import PARAMETER_REGISTRY

logger = logging.getLogger(__name__)


def _type_error(name, registry_type, value):
    if registry_type == "str":
        ok = isinstance(value, str)
    elif registry_type == "list":
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
    elif registry_type == "bool":
        ok = isinstance(value, bool)
    elif registry_type == "int":
        # bool is an int subclass, but yes/no is not a count
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif registry_type == "path":
        ok = isinstance(value, Path)
    elif registry_type == "duration":
        ok = isinstance(value, timedelta)
    else:
        return f"{name}: unknown registry type '{registry_type}'"

    if ok:
        return None
    expected = "list of str" if registry_type == "list" else registry_type
    return f"{name}: expected {expected}, got {type(value).__name__}"


def _range_error(name, entry, value):
    if entry["type"] == "int":
        lower = entry.get("lower")
        upper = entry.get("upper")
        if lower is not None and value < lower:
            return f"{name}: {value} below lower bound {lower}"
        if upper is not None and value > upper:
            return f"{name}: {value} above upper bound {upper}"
    elif entry["type"] == "duration" and value < timedelta(0):
        return f"{name}: duration must not be negative"
    return None


def main(params=None):
    """
    Validate a HostParams layer against the parameter registry.

    Args:
        params: HostParams instance to check

    Returns:
        dict with result status and either success or error details
    """
    if params is None:
        return {
            "result": "FAILURE",
            "error": "Missing params parameter"
        }

    strict = os.getenv("SSH_CONFIG_PREFLIGHT_STRICT", "true").lower() == "true"

    errors = []
    warnings = []

    for name, value in params.set_fields().items():
        entry = PARAMETER_REGISTRY.get(name)
        if entry is None:
            errors.append(f"{name}: not in parameter registry")
            continue

        type_error = _type_error(name, entry["type"], value)
        if type_error:
            errors.append(type_error)
            continue

        range_error = _range_error(name, entry, value)
        if range_error:
            if strict:
                errors.append(range_error)
            else:
                logger.warning(f"Ignoring out of range value in non-strict mode: {range_error}")
                warnings.append(range_error)

    if errors:
        error_msg = "Preflight validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        logger.warning(error_msg)
        return {
            "result": "FAILURE",
            "error": error_msg
        }

    return {
        "result": "SUCCESS",
        "data": {
            "message": "Preflight validation passed",
            "checked_fields": list(params.set_fields().keys()),
            "warnings": warnings
        }
    }
