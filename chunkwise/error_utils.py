"""Error-message extraction for failed processing units."""

from typing import Any


def get_error_message(err: Any) -> str:
    """Return a human-readable message for any failure value.

    Exceptions yield their text, falling back to a ``message`` attribute
    and then to the exception class name when the text is empty. Any
    other value is converted with ``str``. Never raises.
    """
    try:
        if isinstance(err, BaseException):
            text = str(err)
            if text:
                return text
            message = getattr(err, "message", None)
            if isinstance(message, str) and message:
                return message
            return type(err).__name__
        return str(err)
    except Exception:
        return f"<unprintable {type(err).__name__}>"
