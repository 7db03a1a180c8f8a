"""ptrwalk demo — parse, format and evaluate RFC 6901 JSON Pointers."""

from pydantic import BaseModel, ValidationError

import ptrwalk as pw

doc = {
    "foo": ["bar", "baz"],
    "a/b": 1,
    "m~n": 8,
    "users": [{"name": "Ada", "tags": ["admin"]}],
}


# ── 1. Parse: string → tokens ────────────────────────────────────────

ptr = pw.Pointer.parse("/users/0/tags/0")
print("1) parse")
print(f"   {ptr!r}")
print()


# ── 2. Format: tokens → canonical string ─────────────────────────────

print("2) str — escaping '~' and '/'")
print(f"   {str(pw.Pointer(['a/b', 'm~n']))}")
print()


# ── 3. Evaluate against a document ───────────────────────────────────

print("3) eval")
for text in ["", "/foo/1", "/a~1b", "/m~0n", "/users/0/tags/0"]:
    print(f"   {text!r:20s} → {pw.Pointer.parse(text).eval(doc)!r}")
print()


# ── 4. Failures: syntactic vs. resolution ────────────────────────────

print("4) errors")
try:
    pw.Pointer.parse("users")
except pw.InvalidPointerError as exc:
    print(f"   InvalidPointerError: {exc}")
try:
    pw.Pointer.parse("/users/1/name").eval(doc)
except pw.ResolutionError as exc:
    print(f"   ResolutionError: token={exc.token!r} instance={exc.instance!r}")
print()


# ── 5. Non-raising resolution with pattern matching ──────────────────

print("5) resolve")
for text in ["/foo/0", "/foo/01", "/foo/-"]:
    match pw.Pointer.parse(text).resolve(doc):
        case pw.Found(value=value):
            print(f"   {text!r:10s} found {value!r}")
        case pw.Missing(token=token, depth=depth):
            print(f"   {text!r:10s} missing {token!r} at depth {depth}")
print()


# ── 6. Pointers as pydantic fields, validation errors as pointers ────


class Link(BaseModel):
    target: pw.Pointer


class User(BaseModel):
    name: str
    age: int


link = Link.model_validate_json('{"target": "/users/0/name"}')
print("6) pydantic")
print(f"   {link!r} → {link.target.eval(doc)!r}")
print(f"   dump: {link.model_dump_json()}")

bad = {"name": "Ada", "age": "unknown"}
try:
    User.model_validate(bad)
except ValidationError as exc:
    for pointer, result in pw.resolve_error_inputs(exc, bad).items():
        print(f"   invalid at {pointer}: {result}")
