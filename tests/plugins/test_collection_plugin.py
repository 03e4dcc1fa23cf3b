"""
Tests for the Collection and Object Reshaping handlers.
"""

import pytest


@pytest.mark.parametrize(
  "name, snippet, expected",
  [
    ("pick", 'pick(obj, ["name","age"])', 'Object.fromEntries(["name","age"].map(k => [k, obj[k]]))'),
    ("pick", "pick(user, 'name')", "Object.fromEntries(['name'].map(k => [k, user[k]]))"),
    ("pick", "pick(a || b, keys)", "Object.fromEntries(keys.map(k => [k, (a || b)[k]]))"),
    ("omit", "omit(obj, ['a'])", "Object.fromEntries(Object.entries(obj).filter(([k]) => !['a'].includes(k)))"),
    ("merge", "merge(a, b)", "Object.assign({}, a, b)"),
    ("merge", "merge(a, b, c, d)", "Object.assign({}, a, b, c, d)"),
    ("groupBy", "groupBy(users, 'role')", "Object.groupBy(users, item => item.role)"),
    ("groupBy", "groupBy(users, 'address.city')", "Object.groupBy(users, item => item.address.city)"),
    ("groupBy", 'groupBy(users, "first-name")', 'Object.groupBy(users, item => item["first-name"])'),
    ("groupBy", "groupBy(nums, Math.floor)", "Object.groupBy(nums, Math.floor)"),
    (
      "countBy",
      "countBy(words, 'length')",
      "words.reduce((acc, item) => { const key = (item => item.length)(item); "
      "acc[key] = (acc[key] || 0) + 1; return acc; }, {})",
    ),
    ("keyBy", 'keyBy(users, "id")', "Object.fromEntries(users.map(item => [(item => item.id)(item), item]))"),
    ("keyBy", "keyBy(users, getId)", "Object.fromEntries(users.map(item => [(getId)(item), item]))"),
    ("orderBy", "orderBy(users, 'age')", "users.toSorted((a, b) => (item => item.age)(a) - (item => item.age)(b))"),
    ("sortBy", "sortBy(xs)", "xs.toSorted()"),
    ("sortBy", "sortBy(xs, score)", "xs.toSorted((a, b) => score(a) - score(b))"),
    ("sortBy", "sortBy(users, 'age')", "users.toSorted((a, b) => (item => item.age)(a) - (item => item.age)(b))"),
    ("get", "get(user, 'address.city')", "user?.address?.city"),
    ("get", "get(a || b, 'x')", "(a || b)?.x"),
    ("has", "has(obj, 'key')", "'key' in obj"),
    ("has", "has(a || b, k)", "k in (a || b)"),
    ("uniq", "uniq(xs)", "[...new Set(xs)]"),
    ("compact", "compact(xs)", "xs.filter(Boolean)"),
    ("compact", "compact(a || b)", "(a || b).filter(Boolean)"),
  ],
)
def test_collection_rewrites(run_hook, name, snippet, expected):
  assert run_hook(name, snippet) == expected


@pytest.mark.parametrize(
  "name, snippet",
  [
    ("pick", "pick(obj)"),
    ("omit", "omit(obj, a, b)"),
    ("merge", "merge()"),
    ("groupBy", "groupBy(users)"),
    ("countBy", "countBy(users, 'a', 'b')"),
    ("keyBy", 'keyBy(users, "id", extra)'),
    ("orderBy", "orderBy(users, 'age', 'desc')"),
    ("sortBy", "sortBy()"),
    ("get", "get(user, ['a', 'b'])"),
    ("get", "get(user, 'a.b', fallback)"),
    ("get", "get(user, key)"),
    ("get", "get(user, 'a[0].b')"),
    ("has", "has(obj, 'a.b')"),
    ("has", "has(obj, ['a', 'b'])"),
    ("uniq", "uniq(a, b)"),
    ("compact", "compact()"),
  ],
)
def test_collection_declines(run_hook, name, snippet):
  assert run_hook(name, snippet) is None
