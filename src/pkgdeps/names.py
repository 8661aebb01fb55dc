"""Helpers for decomposing fully-qualified Java class names."""

from __future__ import annotations

_ARRAY_PREFIX = "[L"
_ARRAY_SUFFIX = ";"


def unwrap_array_signature(name: str) -> str:
    """Strip a single-level ``[L...;`` array signature from *name*.

    Only one level is recognized: ``[[Lfoo.Bar;`` does not start with
    ``[L`` and is returned unchanged.
    """
    if name.startswith(_ARRAY_PREFIX) and name.endswith(_ARRAY_SUFFIX):
        return name[len(_ARRAY_PREFIX) : -len(_ARRAY_SUFFIX)]
    return name


def split_class_name(name: str) -> tuple[str, str]:
    """Return ``(package, simple_name)`` for a possibly array-wrapped class name.

    A class in the default package has package ``""``.  A dot in the very
    first position does not count as a separator, so ``".Foo"`` is a
    default-package class named ``".Foo"``.  Inner-class markers (``$``)
    stay part of the simple name.
    """
    unwrapped = unwrap_array_signature(name)
    idx = unwrapped.rfind(".")
    if idx > 0:
        return unwrapped[:idx], unwrapped[idx + 1 :]
    return "", unwrapped


def package_of(name: str) -> str:
    return split_class_name(name)[0]


def simple_name_of(name: str) -> str:
    return split_class_name(name)[1]
