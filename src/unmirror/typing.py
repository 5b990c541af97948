"""Type definitions for the DevTools Protocol data that unmirror reads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, TypedDict, Union

if TYPE_CHECKING:
    from typing_extensions import TypeAlias


class PropertyPreview(TypedDict, total=False):
    """A [`Runtime.PropertyPreview`]: one property of an object's preview.

    [`Runtime.PropertyPreview`]: https://chromedevtools.github.io/\
devtools-protocol/tot/Runtime/#type-PropertyPreview
    """

    name: str
    type: str
    subtype: str
    value: str
    valuePreview: ObjectPreview
    # Console-domain property previews share the RemoteObject fields
    className: str
    description: str
    preview: ObjectPreview


class ObjectPreview(TypedDict, total=False):
    """A [`Runtime.ObjectPreview`]: a shallow listing of an object's properties.

    [`Runtime.ObjectPreview`]: https://chromedevtools.github.io/\
devtools-protocol/tot/Runtime/#type-ObjectPreview
    """

    type: str
    subtype: str
    description: str
    overflow: bool
    properties: Sequence[PropertyPreview]


class RemoteObject(TypedDict, total=False):
    """A [`Runtime.RemoteObject`]: the description of a value in a remote runtime.

    [`Runtime.RemoteObject`]: https://chromedevtools.github.io/\
devtools-protocol/tot/Runtime/#type-RemoteObject
    """

    type: str
    subtype: str
    className: str
    value: object
    unserializableValue: str
    description: str
    objectId: str
    preview: ObjectPreview


AnyRemoteObject: TypeAlias = Union[RemoteObject, PropertyPreview]
"""Either of the shapes that `unmirror()` can reconstruct a value from."""
