from typing import Dict, Set

GENERATED_KEYS = {"id", "created_at", "updated_at"}


def exclude_keys(data: Dict, keys: Set[str]) -> Dict:
    return {k: v for k, v in data.items() if k not in keys}


def without_generated(data: Dict) -> Dict:
    """Drop server-generated identifiers and timestamps before comparing"""
    return exclude_keys(data, GENERATED_KEYS)
