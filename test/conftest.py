from __future__ import annotations

import pytest

from unmirror.decode import Unmirror
from unmirror.registry import ClassRegistry


@pytest.fixture
def class_registry() -> ClassRegistry:
    return ClassRegistry()


@pytest.fixture
def decoder(class_registry: ClassRegistry) -> Unmirror:
    """An Unmirror that doesn't share classes with other tests."""
    return Unmirror(class_registry=class_registry)
