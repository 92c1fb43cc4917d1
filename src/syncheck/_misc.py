# region License
# -----------------------------------------------------------------------------
# syncheck: _misc.py
#
# Copyright (C) 2024, the syncheck authors
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the conditions in the LICENSE
# file distributed with this package are met.
# -----------------------------------------------------------------------------
# endregion

"""Bits and bobs, like typing-related shims and internal sentinels."""

from typing import Any, Final

from typing_extensions import TypeAlias, override

__all__ = ("MISSING", "TypeAlias", "override")


class _Missing:
    __slots__ = ()

    @override
    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False


MISSING: Final[Any] = _Missing()
"""Internal sentinel for "argument not given, fall back to the class default"."""
