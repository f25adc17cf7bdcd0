from typing import Dict, Iterable

# Server-generated fields that differ between runs
VOLATILE_KEYS = frozenset({"id", "role_id", "author_id", "created_at", "updated_at", "last_login_at"})


def exclude_keys(data: Dict, keys: Iterable[str] = VOLATILE_KEYS) -> Dict:
    keys = set(keys)
    return {k: v for k, v in data.items() if k not in keys}
