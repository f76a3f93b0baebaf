"""Sanity checks on scoring configuration that warn rather than fail."""

import warnings
from typing import Any, Dict, List

DEFAULT_WEIGHTS = {
    "code_weight": 10,
    "location_full_weight": 8,
    "location_prefix_weight": 5,
    "name_weight": 3,
}


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for settings that are valid but likely mistakes.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    scoring = config_dict.get("scoring") or {}
    if not isinstance(scoring, dict):
        return warning_messages

    weights = {}
    for key, default in DEFAULT_WEIGHTS.items():
        value = scoring.get(key, default)
        weights[key] = value if isinstance(value, int) else default

    # A project name is a weaker signal than its number
    if weights["name_weight"] >= weights["code_weight"]:
        warning_messages.append(
            f"name_weight ({weights['name_weight']}) is not lower than code_weight "
            f"({weights['code_weight']}); generic names may outrank project numbers"
        )

    # Partial address should never beat the full address
    if weights["location_prefix_weight"] > weights["location_full_weight"]:
        warning_messages.append(
            f"location_prefix_weight ({weights['location_prefix_weight']}) exceeds "
            f"location_full_weight ({weights['location_full_weight']})"
        )

    min_name_length = scoring.get("min_name_length")
    if isinstance(min_name_length, int) and 0 < min_name_length < 3:
        warning_messages.append(
            f"min_name_length ({min_name_length}) is very short and may produce false matches"
        )

    min_prefix_length = scoring.get("min_prefix_length")
    if isinstance(min_prefix_length, int) and 0 < min_prefix_length < 4:
        warning_messages.append(
            f"min_prefix_length ({min_prefix_length}) lets bare house numbers match"
        )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
