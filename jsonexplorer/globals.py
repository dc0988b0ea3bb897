ROOT = '$'
MAX_DEPTH = 3
MAX_MATCHES = 5
INDENT = 2

COMMON_PATTERNS = (
    ('Direct property access', '$.propertyName'),
    ('Nested property', '$.parent.child'),
    ('Array access', '$.items[0]'),
    ('All array items', '$.items[*]'),
    ('Array filter', '$.items[?(@.price > 10)]'),
    ('Multiple paths', '$..price'),
    ('Array slice', '$.items[0:3]'),
    ('Complex filter', "$.items[?(@.price > 10 & @.category == 'books')]"),
)
