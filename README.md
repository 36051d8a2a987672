# gfastkit

A small library of building blocks for admin-style back-end services.

## Modules

- `gfastkit.slice_tree`: work with flat lists of dict records that form a
  hierarchy by parent id.
  - `parent_son_sort(items, *args)` orders records parent first, each
    followed by its descendants, and annotates each record in place with its
    level (key `"flg"` by default), `"title_prefix"` and `"title_show"`.
  - `push_son_to_parent(items, *args)` nests children under their parents
    (key `"children"` by default; leaves get `None`), optionally keeping only
    records whose filter key equals a filter value.
  - `find_son_by_parent_id(items, parent_id, parent_key, id_key)` returns all
    descendants, depth first.
  - `find_parent_by_son_pid(items, item_id, *args)` returns a record followed
    by all of its ancestors.
  - `find_top_parent(items, item_id, *args)` returns the topmost ancestor, or
    `{}` when the list is empty or the id is unknown.
  - `get_top_pid_list(items, parent_key, id_key)` returns the distinct parent
    ids that belong to no record.
  - `get_slice_by_key(args, key, default)` returns `args[key]`, or the
    default when that entry is `None`.
- `gfastkit.response`: the standard `{"code", "data", "message"}` envelope.
  `Response` (with `to_dict()`), `rjson`, `success_json` (code `0`),
  `fail_json` (code `-1`) and `json_exit`, which raises `ResponseExit`
  carrying the response. `write_tpl` renders a Jinja2 template string with
  a `subStr(value, length)` helper, available as function and filter;
  `sub_str` is that helper. `redirect` returns a `Redirect` (status `302`
  unless given).
- `gfastkit.autobind`: `router_auto_bind(ctx, router, group)` calls every
  method of `router` named `bind_<name>_controller` with `(ctx, group)`, in
  name order, and returns the names called. It raises `TypeError` when
  `router` is not an instance of a user-defined class.
- `gfastkit.registry`: `ServiceRegistry` with `register`, `get` and
  `is_registered`; `get` raises `ServiceNotRegistered` (a `LookupError`) for
  a service with no implementation. A shared instance is available as
  `gfastkit.registry.services`, and `SERVICE_NAMES` lists the usual names.
- `gfastkit.errors`: `AppError`, with `err_is_nil(err, *args)` (raises when
  `err` is set, using the optional message in place of the error's text) and
  `value_is_nil(value, msg)` (raises when `value` is `None`).

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sorting and nesting a hierarchy:

```python
from gfastkit.slice_tree import parent_son_sort, push_son_to_parent

rows = [
    {"id": 1, "pid": 0, "title": "System"},
    {"id": 2, "pid": 1, "title": "Users"},
    {"id": 3, "pid": 1, "title": "Roles"},
]

for row in parent_son_sort([dict(r) for r in rows]):
    print(row["title_show"])

tree = push_son_to_parent([dict(r) for r in rows])
print(tree[0]["children"])
```

Building a response envelope:

```python
from gfastkit.response import success_json

print(success_json(False, "ok", {"total": 3}).to_dict())
# {'code': 0, 'data': {'total': 3}, 'message': 'ok'}
```

Binding controllers:

```python
from gfastkit.autobind import router_auto_bind

class Routes:
    def bind_user_controller(self, ctx, group):
        group.append("user")

group = []
print(router_auto_bind(None, Routes(), group))  # ['bind_user_controller']
```

Registering and looking up a service:

```python
from gfastkit.registry import ServiceRegistry

services = ServiceRegistry()
services.register("SysUser", object())
user_service = services.get("SysUser")
```

## What this package does not do

It is a library only. It provides no command, no HTTP server or route
table, no storage, and no password hashing, file or upload-path helpers;
the response and binding helpers produce values for a web framework of
your choice to send.