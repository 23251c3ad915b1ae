"""
sexpr End-to-End Example (Python)

Demonstrates the full lifecycle:
1. Parse a buffer into a tree
2. Inspect the tree
3. Render it in canonical form
4. Truncate an over-long token
5. Hit each structural error
6. Release the tree

Run: pip install -e . && python examples/e2e/e2e.py
"""

import logging

from sexpr import (
    Limits, SList, parse, render, destroy,
    ListTooLong, UnexpectedEndOfInput,
)

logging.basicConfig(format="%(levelname)s: %(message)s")

print("=== sexpr E2E Demo ===\n")

# 1. Parse
src = """(define (square x)
  (*   x x))"""
tree = parse(src)
print("1. Parsed expression")
print(f"   Top-level children: {len(tree)}\n")

# 2. Inspect
print("2. Walk the tree")
for child in tree:
    kind = "list" if isinstance(child, SList) else "token"
    print(f"   {kind}: {child}")
print()

# 3. Render
print("3. Canonical form")
print(f"   {render(tree)}\n")

# 4. Truncation
short = parse("(abcdefgh ij)", Limits(max_token_length=4))
print("4. Token truncated to 4 characters")
print(f"   {render(short)}\n")

# 5. Errors
print("5. Structural errors")
try:
    parse("(a b")
except UnexpectedEndOfInput as e:
    print(f"   UnexpectedEndOfInput: {e}")
try:
    parse("(a b c)", {"max_children": 2})
except ListTooLong as e:
    print(f"   ListTooLong: {e}")
print()

# 6. Release
released = []
destroy(tree, released.append)
print("6. Destroyed tree")
print(f"   Nodes released: {len(released)}")

print("\n=== All checks passed ===")
