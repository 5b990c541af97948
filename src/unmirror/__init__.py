"""The main public API of unmirror."""

from __future__ import annotations

from unmirror._errors import DepthLimitUnmirrorError as DepthLimitUnmirrorError
from unmirror._errors import JSRegExpUnmirrorError as JSRegExpUnmirrorError
from unmirror._errors import MalformedUnmirrorError as MalformedUnmirrorError
from unmirror._errors import UnmirrorError as UnmirrorError
from unmirror._numeric import parse_numeric_text as parse_numeric_text
from unmirror.constants import JSErrorName as JSErrorName
from unmirror.constants import JSRegExpFlag as JSRegExpFlag
from unmirror.constants import RemoteObjectSubtype as RemoteObjectSubtype
from unmirror.constants import RemoteObjectType as RemoteObjectType
from unmirror.decode import Unmirror as Unmirror
from unmirror.decode import unmirror as unmirror
from unmirror.registry import ClassRegistry as ClassRegistry
from unmirror.registry import default_class_registry as default_class_registry
