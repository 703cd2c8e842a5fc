REFERENCE_SOURCE = """# Basil Keywords

## PRINT
*Type:* Statement
Writes its arguments to standard output.

```basil
PRINT "hi" REM greet
```

## FOR EACH
*Type:* Flow control
Iterates over every element of a list.
"""

CATEGORY_SOURCE = """# By Category

## Input/Output
### PRINT
Writes output.

## Loops
### FOR EACH
Iterates over a list.
"""
