"""Helpers for flat lists of records that form a parent/child hierarchy."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Record = dict[str, Any]

_FALSE_STRINGS = {"", "0", "false", "off", "no"}


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        try:
            return int(float(text))
        except (ValueError, OverflowError):
            return 0


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _to_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def _pad(args: Sequence[Any], size: int) -> list[Any]:
    padded = list(args[:size])
    padded.extend([None] * (size - len(padded)))
    return padded


def get_slice_by_key(args: Sequence[Any], key: int, default: Any) -> Any:
    """Return args[key], or default when that entry is None."""
    value = args[key]
    return default if value is None else value


def parent_son_sort(items: list[Record], *args: Any) -> list[Record]:
    """Order records parent first, each followed by its descendants.

    Optional positional arguments: parent id (0), level (0), parent key
    ("pid"), id key ("id"), level key ("flg"), title key ("title"), level at
    which to stop descending (-1 for none) and the title prefix ("─").
    Each returned record is annotated in place with its level,
    "title_prefix" and "title_show".
    """
    opts = _pad(args, 8)
    pid = _to_int(get_slice_by_key(opts, 0, 0))
    level = _to_int(get_slice_by_key(opts, 1, 0))
    parent_key = _to_str(get_slice_by_key(opts, 2, "pid"))
    id_key = _to_str(get_slice_by_key(opts, 3, "id"))
    level_key = _to_str(get_slice_by_key(opts, 4, "flg"))
    title_key = _to_str(get_slice_by_key(opts, 5, "title"))
    breaks = _to_int(get_slice_by_key(opts, 6, -1))
    prefix = _to_str(get_slice_by_key(opts, 7, "─"))

    result: list[Record] = []
    for item in items:
        if _to_int(item.get(parent_key)) != pid:
            continue
        item[level_key] = level
        item["title_prefix"] = "" if level == 0 else "├" + prefix * (level + 1)
        item["title_show"] = f"{item['title_prefix']}{_to_str(item.get(title_key))}"
        result.append(item)
        if breaks != -1 and breaks == level:
            continue
        opts[0] = item.get(id_key)
        opts[1] = level + 1
        result.extend(parent_son_sort(items, *opts))
    return result


def push_son_to_parent(items: list[Record], *args: Any) -> list[Record]:
    """Build a tree by nesting each record's children under it.

    Optional positional arguments: parent id (0), parent key ("pid"), id key
    ("id"), children key ("children"), filter key (""), filter value (None)
    and whether to set the children key on leaves (True; leaves get None).
    """
    opts = _pad(args, 7)
    pid = _to_str(get_slice_by_key(opts, 0, 0))
    parent_key = _to_str(get_slice_by_key(opts, 1, "pid"))
    id_key = _to_str(get_slice_by_key(opts, 2, "id"))
    child_key = _to_str(get_slice_by_key(opts, 3, "children"))
    filter_key = _to_str(get_slice_by_key(opts, 4, ""))
    filter_value = get_slice_by_key(opts, 5, None)
    show_no_child = _to_bool(get_slice_by_key(opts, 6, True))

    result: list[Record] = []
    for item in items:
        if _to_str(item.get(parent_key)) != pid:
            continue
        if filter_key and item.get(filter_key) != filter_value:
            continue
        opts[0] = item.get(id_key)
        children = push_son_to_parent(items, *opts)
        if children or show_no_child:
            item[child_key] = children or None
        result.append(item)
    return result


def find_son_by_parent_id(
    items: list[Record], parent_id: Any, parent_key: str, id_key: str
) -> list[Record]:
    """Return every descendant of parent_id, depth first."""
    result: list[Record] = []
    for item in items:
        if item.get(parent_key) == parent_id:
            result.append(item)
            result.extend(find_son_by_parent_id(items, item.get(id_key), parent_key, id_key))
    return result


def get_top_pid_list(items: list[Record], parent_key: str, id_key: str) -> list[Any]:
    """Return the distinct parent ids that do not belong to any record."""
    tops: list[Any] = []
    for item in items:
        parent = item.get(parent_key)
        if any(parent == other.get(id_key) for other in items):
            continue
        if parent not in tops:
            tops.append(parent)
    return tops


def find_parent_by_son_pid(items: list[Record], item_id: Any, *args: Any) -> list[Record]:
    """Return the record with item_id followed by all of its ancestors.

    Optional positional arguments: filter key ("filter"), parent key ("pid"),
    filter value (None) and id key ("id"). Records carrying the filter key
    are kept only when their value equals the filter value.
    """
    opts = _pad(args, 4)
    filter_key = _to_str(get_slice_by_key(opts, 0, "filter"))
    parent_key = _to_str(get_slice_by_key(opts, 1, "pid"))
    filter_value = get_slice_by_key(opts, 2, None)
    id_key = _to_str(get_slice_by_key(opts, 3, "id"))

    target = _to_int(item_id)
    result: list[Record] = []
    for item in items:
        if _to_int(item.get(id_key)) != target:
            continue
        if filter_key not in item or item[filter_key] == filter_value:
            result.append(item)
        result.extend(
            find_parent_by_son_pid(
                items,
                _to_int(item.get(parent_key)),
                filter_key,
                parent_key,
                filter_value,
                id_key,
            )
        )
    return result


def find_top_parent(items: list[Record], item_id: Any, *args: Any) -> Record:
    """Return the topmost ancestor of the record with item_id.

    Optional positional arguments: parent key ("pid") and id key ("id").
    An empty dict is returned when the list is empty or the id is unknown.
    """
    if not items:
        return {}
    opts = _pad(args, 2)
    parent_key = _to_str(get_slice_by_key(opts, 0, "pid"))
    id_key = _to_str(get_slice_by_key(opts, 1, "id"))

    target = _to_int(item_id)
    top: Record = next((item for item in items if _to_int(item.get(id_key)) == target), {})
    while True:
        parent_id = _to_int(top.get(parent_key))
        parent = next((item for item in items if _to_int(item.get(id_key)) == parent_id), None)
        if parent is None:
            return top
        top = parent