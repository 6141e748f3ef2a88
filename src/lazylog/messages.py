"""
Message construction helpers.

Two ways of producing the text of a log entry are supported:

- a deferred producer (any zero-argument callable), evaluated through
  to_string_safe so that a failing producer turns into a log entry instead of
  an exception at the call site;
- a template with ``{}`` placeholders and positional arguments, wrapped in a
  BraceMessage that the backend renders when a handler formats the record.
"""

from typing import Any, Callable, List, Sequence, Tuple

FAILED_INVOCATION_PREFIX = "Log message invocation failed: "

PLACEHOLDER = "{}"
ESCAPE = "\\"


def strip_locals(parts: List[str]) -> List[str]:
    """Drop ``<locals>`` markers along with the function names owning them."""
    cleaned: List[str] = []
    for part in parts:
        if part == "<locals>":
            if cleaned:
                cleaned.pop()
        else:
            cleaned.append(part)
    return cleaned


def describe_error(error: BaseException) -> str:
    """Render an exception as ``qualified.ClassName: message``.

    Builtin exceptions are shown unqualified and the message part is left out
    when the exception carries no text.
    """
    cls = type(error)
    name = ".".join(strip_locals(cls.__qualname__.split("."))) or cls.__name__
    if cls.__module__ != "builtins":
        name = f"{cls.__module__}.{name}"
    try:
        text = str(error)
    except Exception:
        text = ""
    return f"{name}: {text}" if text else name


def to_string_safe(producer: Callable[[], Any]) -> str:
    """Call producer and return its result as a string, never raising.

    A producer raising an Exception yields the failure description prefixed
    with FAILED_INVOCATION_PREFIX.
    """
    try:
        return str(producer())
    except Exception as e:
        return FAILED_INVOCATION_PREFIX + describe_error(e)


def _render(arg: Any) -> str:
    try:
        return str(arg)
    except Exception:
        return "[FAILED toString()]"


def substitute(template: str, args: Sequence[Any]) -> Tuple[str, int]:
    """Replace ``{}`` placeholders left to right with the given arguments.

    Returns the rendered text and the number of arguments consumed. Argument
    text is appended verbatim and never scanned again. ``\\{}`` produces a
    literal ``{}``; ``\\\\{}`` produces a backslash followed by the argument.
    """
    if not args:
        return template, 0

    parts = []
    position = 0
    used = 0
    while used < len(args):
        index = template.find(PLACEHOLDER, position)
        if index == -1:
            break
        escaped = index > 0 and template[index - 1] == ESCAPE
        double_escaped = escaped and index > 1 and template[index - 2] == ESCAPE
        if escaped and not double_escaped:
            parts.append(template[position:index - 1])
            parts.append("{")
            position = index + 1
            continue
        if double_escaped:
            parts.append(template[position:index - 1])
        else:
            parts.append(template[position:index])
        parts.append(_render(args[used]))
        used += 1
        position = index + len(PLACEHOLDER)
    parts.append(template[position:])
    return "".join(parts), used


def count_placeholders(template: str) -> int:
    """Number of unescaped ``{}`` placeholders in template."""
    count = 0
    position = 0
    while True:
        index = template.find(PLACEHOLDER, position)
        if index == -1:
            return count
        escaped = index > 0 and template[index - 1] == ESCAPE
        if not escaped or (index > 1 and template[index - 2] == ESCAPE):
            count += 1
            position = index + len(PLACEHOLDER)
        else:
            position = index + 1


def format_message(template: str, *args: Any) -> str:
    return substitute(template, args)[0]


class BraceMessage:
    """Template plus arguments, rendered on first str().

    The stdlib calls str() on record.msg when record.args is empty, so passing
    a BraceMessage as the message defers substitution to the backend.
    """

    __slots__ = ("template", "args", "_text")

    def __init__(self, template: Any, args: Sequence[Any] = ()):
        self.template = template
        self.args = tuple(args)
        self._text = None

    def __str__(self) -> str:
        if self._text is None:
            self._text = substitute(str(self.template), self.args)[0]
        return self._text

    def __repr__(self) -> str:
        return f"BraceMessage({self.template!r}, {self.args!r})"
