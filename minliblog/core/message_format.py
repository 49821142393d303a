"""
Composite message formatting

Messages use positional placeholders ({0}, {1}, ...) resolved with
str.format. Literal braces are written as {{ and }}.
"""

from string import Formatter
from typing import Any, Optional, Sequence, Tuple

from minliblog.core.errors import MessageFormatError

_formatter = Formatter()


def format_message(message: Any, args: Sequence[Any]) -> str:
    """
    Substitute positional arguments into a message template.

    Args:
        message: Composite format string. Non-strings are converted with str().
        args: Positional values for the placeholders

    Returns:
        Formatted message

    Raises:
        MessageFormatError: If a placeholder has no matching argument or
                            the template is malformed
    """
    if not isinstance(message, str):
        message = str(message)

    try:
        return message.format(*args)
    except (IndexError, KeyError, ValueError, TypeError, AttributeError) as e:
        raise MessageFormatError(message, tuple(args), f"{type(e).__name__}: {e}") from e


def placeholder_count(message: Any) -> int:
    """
    Return how many positional arguments a template consumes.

    That is one more than the highest index referenced, counting
    automatic {} fields in order. Malformed templates return 0; the
    error surfaces when the message is formatted.
    """
    if not isinstance(message, str):
        message = str(message)

    auto_index = [0]
    try:
        return _count_fields(message, auto_index)
    except ValueError:
        return 0


def _count_fields(template: str, auto_index: list) -> int:
    count = 0
    for _, field_name, format_spec, _ in _formatter.parse(template):
        if field_name is None:
            continue
        head = field_name.split(".", 1)[0].split("[", 1)[0]
        if head == "":
            count = max(count, auto_index[0] + 1)
            auto_index[0] += 1
        elif head.isdigit():
            count = max(count, int(head) + 1)
        # Nested fields such as {0:{1}}
        if format_spec:
            count = max(count, _count_fields(format_spec, auto_index))
    return count


def split_exception(
    message: Any,
    args: Tuple[Any, ...],
    exception: Optional[BaseException],
) -> Tuple[Tuple[Any, ...], Optional[BaseException]]:
    """
    Pick up an exception passed as the first positional argument.

    error("boom", err) attaches err, like error("boom", exception=err).
    A leading exception is only taken when the template does not need it
    as a format argument, so error("failed: {0}", err) still interpolates.

    Returns:
        (format arguments, exception)
    """
    if exception is not None or not args or not isinstance(args[0], BaseException):
        return args, exception
    if placeholder_count(message) >= len(args):
        return args, exception
    return args[1:], args[0]
