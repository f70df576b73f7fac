from typing import TypeVar

IdT = TypeVar("IdT")


def parse_id(id_type: type[IdT], raw: str | int | None) -> IdT | None:
    """Parse a path/query identifier into ``id_type``.

    Returns None when ``raw`` is not a positive integer; no record can have
    such an id, so callers treat it as absent.
    """
    if raw is None or isinstance(raw, bool):
        return None
    try:
        if isinstance(raw, int):
            return id_type(raw)
        return id_type.from_string(raw)
    except (TypeError, ValueError):
        return None
