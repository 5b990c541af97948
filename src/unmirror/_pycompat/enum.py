from __future__ import annotations

import sys
from enum import EnumMeta, IntFlag
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from typing_extensions import Self


class ContainsValueEnumMeta(EnumMeta):
    """Allow `"regexp" in RemoteObjectSubtype` on Python versions before 3.12."""

    def __contains__(cls, value: object) -> bool:
        return value in cls._value2member_map_


if sys.version_info < (3, 11):
    from enum import Enum

    class StrEnum(str, Enum, metaclass=ContainsValueEnumMeta):
        def __str__(self) -> str:
            return str(self._value_)

    class IterableIntFlag(IntFlag):
        def __iter__(self) -> Iterator[Self]:
            for flag in type(self):
                if flag and self & flag == flag:
                    yield flag

else:
    from enum import StrEnum as _StrEnum

    class StrEnum(_StrEnum, metaclass=ContainsValueEnumMeta):
        pass

    class IterableIntFlag(IntFlag):
        pass
