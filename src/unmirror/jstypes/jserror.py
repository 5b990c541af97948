from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from unmirror._errors import UnmirrorError
from unmirror.constants import JSErrorName


@dataclass(init=False)
class JSError(UnmirrorError):
    """A Python Exception that represents a JavaScript Error.

    `JSError` can be raised to surface an error observed in a remote runtime
    as a Python exception.

    Parameters
    ----------
    message
        A description of the error.
    name
        The JavaScript Error constructor that the error was created with.
    stack
        The stack trace detailing where the error happened.
    properties
        Extra properties the error carried, such as a Node.js error's `code`.
        These are not enumerable on the JavaScript side, so they are kept apart
        from the standard fields.

    Examples
    --------
    >>> err = JSError("bad arg", name=JSErrorName.TypeError, properties={"code": 1})
    >>> str(err)
    'TypeError: bad arg'
    >>> err.properties
    {'code': 1}
    """

    name: JSErrorName
    """The JavaScript Error's constructor name."""
    stack: str | None
    """The stack trace showing details of the Error and the calls that lead up
    to the error."""
    properties: dict[str, object]
    """Extra, non-enumerable properties, in the order they were described."""

    def __init__(
        self,
        message: str | None = None,
        *,
        name: JSErrorName = JSErrorName.Error,
        stack: str | None = None,
        properties: Mapping[str, object] | Iterable[tuple[str, object]] = (),
    ) -> None:
        super(JSError, self).__init__(message or "")
        self.name = name
        self.stack = stack
        self.properties = dict(properties)

    @property
    def message(self) -> str:
        """The JavaScript Error's message."""
        return str(self.args[0])

    @message.setter
    def message(self, message: str | None) -> None:
        self.args = (message or "", *self.args[1:])

    def __str__(self) -> str:
        if self.message:
            return f"{self.name}: {self.message}"
        return str(self.name)

    def __repr__(self) -> str:
        properties = f", properties={self.properties!r}" if self.properties else ""
        return (
            f"JSError({self.message!r}, name={self.name!r}, "
            f"stack={self.stack!r}{properties})"
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, JSError):
            return NotImplemented
        if self.__traceback__ != other.__traceback__:
            return False
        return (self.name, self.message, self.stack, self.properties) == (
            other.name,
            other.message,
            other.stack,
            other.properties,
        )
