# CLI CONST
EDGE_SEPARATOR = ":"
INTEGER_PATTERN = "-?[0-9]+"
BEFORE = "before"
EQUAL = "equal"
AFTER = "after"

# LOGGER CONST
EDGEIO = "edgeio"
