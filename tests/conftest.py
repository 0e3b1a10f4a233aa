"""Shared test fixtures for indent-complexity tests."""

import pytest


@pytest.fixture
def nested_source():
    """Brace-style code with depths [0, 1, 2, 1, 0]."""
    return "function foo() {\n  if (true) {\n    console.log('nested');\n  }\n}"


@pytest.fixture
def flat_source():
    """Five lines at depth 0."""
    return "a\nb\nc\nd\ne"


@pytest.fixture
def sample_diff():
    """Git diff adding seven nested lines under three context lines."""
    return (
        "diff --git a/src/app.ts b/src/app.ts\n"
        "index 1234567..abcdefg 100644\n"
        "--- a/src/app.ts\n"
        "+++ b/src/app.ts\n"
        "@@ -10,6 +10,12 @@ export function processOrders(orders: Order[]) {\n"
        "       if (validated.isValid) {\n"
        "         for (const item of order.items) {\n"
        "+          if (item.quantity > 0) {\n"
        "+            const processed = {\n"
        "+              id: item.id,\n"
        "+              total: item.price * item.quantity,\n"
        "+            };\n"
        "+            results.push(processed);\n"
        "+          }\n"
        "         }\n"
        "       }\n"
    )


@pytest.fixture
def mixed_diff():
    """Hunk with two deletions and two additions."""
    return "@@ -1,3 +1,3 @@\n-old line\n-  old nested\n+new line\n+    new deeply nested"
