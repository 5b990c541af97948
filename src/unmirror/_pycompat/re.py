from __future__ import annotations

from re import DOTALL, IGNORECASE, MULTILINE, UNICODE

from unmirror._pycompat.enum import IterableIntFlag


# 3.9 and 3.10 lack RegexFlag.NOFLAG
class RegexFlag(IterableIntFlag):
    NOFLAG = 0
    DOTALL = DOTALL
    IGNORECASE = IGNORECASE
    MULTILINE = MULTILINE
    UNICODE = UNICODE
