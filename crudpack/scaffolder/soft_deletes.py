"""Active vs. commented-out soft-delete code blocks.

Soft-delete specific code is emitted either as working code or, when soft
deletes are off, as the identical code with every line commented out under
a one-line header explaining how to turn it back on.
"""

from __future__ import annotations

SOFT_DISABLED_HEADER = "Soft Deletes disabled: uncomment after enabling SoftDeletes"


def _indent_of(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def comment_out_php(code: str, header: str = SOFT_DISABLED_HEADER) -> str:
    """Comment out PHP *code* line by line, keeping each line's indentation.

    The header comment takes the indentation of the first non-blank line.
    Blank lines stay blank; a trailing newline is preserved.
    """
    lines = code.rstrip("\n").split("\n")
    first = next((line for line in lines if line.strip()), "")
    out = [f"{_indent_of(first)}// {header}"]
    for line in lines:
        if not line.strip():
            out.append("")
            continue
        out.append(f"{_indent_of(line)}// {line.strip()}")
    return "\n".join(out) + ("\n" if code.endswith("\n") else "")


def comment_out_blade(code: str, header: str = SOFT_DISABLED_HEADER) -> str:
    """Comment out Blade *code* by wrapping every line in ``{{-- ... --}}``."""
    lines = code.rstrip("\n").split("\n")
    first = next((line for line in lines if line.strip()), "")
    out = [f"{_indent_of(first)}{{{{-- {header} --}}}}"]
    for line in lines:
        if not line.strip():
            out.append("")
            continue
        out.append(f"{_indent_of(line)}{{{{-- {line.strip()} --}}}}")
    return "\n".join(out) + ("\n" if code.endswith("\n") else "")


def soft_block(code: str, soft: bool, *, blade: bool = False, header: str = SOFT_DISABLED_HEADER) -> str:
    """Return *code* unchanged when *soft*, otherwise its commented-out form."""
    if soft:
        return code
    if blade:
        return comment_out_blade(code, header)
    return comment_out_php(code, header)
