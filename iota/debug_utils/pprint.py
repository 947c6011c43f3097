from iota.types.symbol import Symbol
from iota.types.lambda_fn import Lambda

DEFAULT_MAX_LINE_LENGTH = 80


def to_string(value) -> str:
    """External representation of a runtime value."""
    if value is None:
        return ""
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, Lambda):
        return "<lambda (" + " ".join(str(f) for f in value.formals) + ")>"
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if callable(value):
        return f"<primitive {getattr(value, '__name__', value)}>"
    return str(value)


def pprint_expr(expr, indent: int = 0, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """Render a syntax tree, breaking compound forms that overflow a line."""
    if not isinstance(expr, list):
        return to_string(expr)
    if not expr:
        return "()"

    parts = [pprint_expr(e, indent + 1, max_line_length) for e in expr]

    single_line = "(" + " ".join(parts) + ")"
    if "\n" not in single_line and len(single_line) + indent * 2 <= max_line_length:
        return single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)
