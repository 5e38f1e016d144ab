"""JSON data normalization helpers for tabular data display."""

from typing import Any, Dict, List

from core.data_models import Record


def convert_json_data(data: Any) -> List[Record]:
    """
    Convert parsed JSON-like data to a list of records.

    Lists are passed through. Mappings become key/value records in
    insertion order, with nested section mappings flattened to dotted keys
    (section.key) so every record stays properties-shaped.

    Args:
        data: Parsed data (list, dict or anything else)

    Returns:
        List of records; empty for unsupported data
    """
    if isinstance(data, list):
        return list(data)
    if isinstance(data, dict):
        return [{'key': key, 'value': value}
                for key, value in flatten_object(data).items()]
    return []


def flatten_object(data: Dict[str, Any], prefix: str = '') -> Dict[str, Any]:
    """Flatten nested dicts into a single dict with dotted keys."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten_object(value, f"{full_key}."))
        else:
            flat[full_key] = value
    return flat
