# ino

A small toolkit for web applications and the code behind them:

- **Route patterns** (`ino.pattern`): compile templates such as
  `/users/{id}` or `/posts/{year:\d{4}}/{slug}` and match request paths
  against them.
- **Routes and route groups** (`ino.route`, `ino.router`): describe
  handlers per HTTP method and group them under a common prefix with
  shared attributes.
- **Validators** (`ino.validate`): composable checks for numbers,
  strings, sequences, objects and conditional rules, with readable
  error messages.
- **Database building blocks** (`ino.shorten`): abstract connection,
  transaction and result-set types, transaction scopes carried in the
  current context, and a mapping from column names to dataclass fields.

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Route patterns

```python
from ino.pattern import parse_route_pattern

pattern = parse_route_pattern("/api/{version}/users/{id:\\d+}")
pattern.match("/api/v1/users/42/")    # {"version": "v1", "id": "42"}
pattern.match("/api/v1/users/abc")    # None
pattern.param_names                   # ["version", "id"]
```

- `{name}` matches one path segment; `{name:regex}` uses your own
  expression.
- `{*}` matches the rest of the path, slashes included; the captured
  value never keeps a trailing slash.
- Text outside placeholders is matched literally, so `.`, `+`, `?`,
  `(`, `$` and the like need no escaping.
- A trailing slash in the template is ignored, and an optional trailing
  slash is always accepted when matching.
- An empty template, an empty or duplicate parameter name, or a custom
  expression that does not compile raises `PatternError` (a
  `ValueError`).

`RoutePattern` also carries `original` (the template as given), `regex`
(the compiled expression) and `depth` (the number of slashes in the
template).

## Routes and groups

```python
from ino.route import get, post
from ino.router import prefix_routes, routes

def list_users(request): ...
def create_user(request): ...

api = prefix_routes(
    "/api",
    get("/users", list_users),
    post("/users", create_user, "admin"),
    "authenticated",
)
[(r.method, r.pattern, r.attrs) for r in api]
# [("GET", "/api/users", ("authenticated",)),
#  ("POST", "/api/users", ("admin", "authenticated"))]
```

`get`, `post`, `put`, `delete`, `options`, `head`, `connect`, `patch` and
`trace` build a `Route` for their method; `handle(method, pattern,
handler, *attrs)` takes the method explicitly, and `is_valid_method`
checks a method name. A pattern that is empty or does not start with
`/`, an unknown method, or a `None` handler raises `ValueError`.

`routes(...)` and `prefix_routes(prefix, ...)` return a `StackRoutes`
list. Routes and other `StackRoutes` passed in are collected; anything
else becomes an attribute appended to every collected route's own
attributes. Groups nest. A prefix shorter than two characters or not
starting with `/` raises `ValueError`.

## Validators

Every validator has `validate(value)`, which returns an `Errors` list:
`is_valid()` is true when it is empty and `message()` joins the messages
with newlines.

```python
from ino.validate.numeric import min_value
from ino.validate.when import when

check = when(lambda n: n % 2 == 0, min_value(10))
check.validate(8).message()   # "must be greater than or equal to 10"
check.validate(9).is_valid()  # True (condition false, nothing checked)
```

Checking the fields of an object:

```python
from dataclasses import dataclass
from ino.validate.base import FieldDescriptor
from ino.validate.field import field
from ino.validate.numeric import min_value
from ino.validate.strings import min_runes
from ino.validate.structs import struct

@dataclass
class Person:
    age: int
    name: str

check = struct(
    field(FieldDescriptor("age"), min_value(10)),
    field(FieldDescriptor("name"), min_runes(2)),
)
print(check.validate(Person(5, "a")).message())
# > 'age': must be greater than or equal to 10
# > 'name': must have at least 2 characters
```

`FieldDescriptor(name)` reads the attribute `name`; pass
`getter=` to read the value some other way.

The building blocks:

| Module | Functions |
| --- | --- |
| `ino.validate.numeric` | `min_value`, `max_value` |
| `ino.validate.oneof` | `one_of` |
| `ino.validate.strings` | `regex`, `runes_exactly`, `min_runes`, `max_runes` |
| `ino.validate.sequence` | `each`, `min_count`, `max_count` |
| `ino.validate.field` | `field` |
| `ino.validate.structs` | `struct` |
| `ino.validate.when` | `when`, `when_not_none` |
| `ino.validate.equality` | `deep_equal`, `must` |
| `ino.validate.base` | `Errors`, `Validator`, `FuncValidator`, `FieldDescriptor` |

`each` stops after the first element that has errors and prefixes
messages with the element index (`> [1]: ...`). `regex` accepts a string
or a compiled pattern and searches anywhere in the value; `None` raises
`ValueError`. `FuncValidator(func)` turns a callable returning messages
(or `None`) into a validator. `must(value, *validators)` raises
`AssertionError` with all messages when any validator rejects the value,
which makes it handy in tests.

## Transaction scopes and row mapping

`ino.shorten.base` defines the abstract types the helpers work with:
`Factory` (hands out connections and transactions), `Executor`
(`prepare`, `execute`, `query`, `release`; releases itself when used in a
`with` block), `Tx` (an executor with `commit` and `rollback`), `Stmt`,
`Rows` (iterating yields each row as a tuple; closes itself in a `with`
block) and the `IsolationLevel` enum.

`ino.shorten.scope` shares one transaction across the code running
inside a scope:

```python
from ino.shorten.scope import get, scope

with scope() as tx_scope:
    executor = get(factory)   # begins a transaction on first use
    executor.execute("update accounts set balance = balance - ?", 10)
    if something_went_wrong:
        tx_scope.rollback()
# committed on normal exit; rolled back if rollback() was called
# or an exception escaped the block
```

- `get(factory)` returns the active scope's transaction, beginning it
  with the scope's isolation level if needed, or `factory.get_connection()`
  outside any scope.
- `scope()` reuses a scope that is already active; `scope_options(
  require_new, level)` can force a fresh one and choose the isolation
  level.
- `suppress_scope()` runs the enclosed code with no active scope;
  `current_scope()` returns the active one, if any.
- `TxScope.end(error)` finishes the transaction by hand: with an error it
  rolls back and ignores a rollback failure; otherwise a failed commit or
  rollback is raised.

`ino.shorten.mapper` maps column names to dataclass fields:

```python
from dataclasses import dataclass, field
from ino.shorten.mapper import get_struct_mapping

@dataclass
class User:
    id: int = field(metadata={"ino": "user_id"})
    name: str = ""
    secret_note: str = field(default="", metadata={"ino": "-"})

dict(get_struct_mapping(User))   # {"user_id": ("id",), "name": ("name",)}
```

Fields named `-` and fields whose names start with an underscore are
skipped; a field with `ino_embedded` metadata holding a dataclass
contributes that dataclass's columns under a longer attribute path.
`get_struct_mapping` caches its result and raises `TypeError` for
anything that is not a dataclass.

## What this package does not do

- It does not serve HTTP. Routes and patterns describe and match paths;
  dispatching requests to handlers is left to your server or framework.
- It ships no database driver adapter and no query or row-scanning
  helpers. To use transaction scopes you implement `Factory`, `Executor`
  and `Tx` for your database yourself; `get_struct_mapping` tells you
  which attribute each column belongs to, but filling objects from rows
  is up to your code.