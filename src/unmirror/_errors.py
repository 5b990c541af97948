from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, cast


@dataclass(init=False)
class UnmirrorError(Exception):
    """The base class that all unmirror errors are subclasses of."""

    if not TYPE_CHECKING:
        message: str  # needed to have dataclass include message in the repr, etc

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)

    @property
    def message(self) -> str:
        return cast(str, self.args[0])

    def __str__(self) -> str:
        field_values = [
            (f.name, getattr(self, f.name)) for f in fields(self) if f.name != "message"
        ]
        values_fmt = ", ".join(f"{f}={v!r}" for (f, v) in field_values)

        if values_fmt:
            return f"{self.message}: {values_fmt}"
        return self.message


@dataclass(init=False)
class MalformedUnmirrorError(UnmirrorError, ValueError):
    """
    A remote object describes a value that cannot be reconstructed at all.

    Most incomplete remote objects are reconstructed on a best-effort basis.
    This is only raised when no valid value exists, for example a Date whose
    description is `"Invalid Date"`, or a RegExp with flags JavaScript rejects.
    """

    remote_object: Mapping[str, object]

    def __init__(
        self, message: str, *args: object, remote_object: Mapping[str, object]
    ) -> None:
        super().__init__(message, *args)
        self.remote_object = remote_object


@dataclass(init=False)
class DepthLimitUnmirrorError(MalformedUnmirrorError):
    """Previews nested deeper than the decoder's `max_depth` were encountered."""

    max_depth: int

    def __init__(
        self,
        message: str,
        *args: object,
        remote_object: Mapping[str, object],
        max_depth: int,
    ) -> None:
        super().__init__(message, *args, remote_object=remote_object)
        self.max_depth = max_depth


class JSRegExpUnmirrorError(UnmirrorError, ValueError):
    pass
