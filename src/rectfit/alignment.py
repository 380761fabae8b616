# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Vocabularies controlling how a rectangle is resized and positioned.

Each is an IntEnum so the numeric values stay stable for callers that
store or pass them around as plain ints.
"""
import enum
from typing import Type, TypeVar


_E = TypeVar("_E", bound=enum.IntEnum)


class AspectRatioMode(enum.IntEnum):
    # set width and height to match the target
    IGNORE = 0
    # resize to completely fit within the target
    KEEP = 1
    # resize to completely enclose the target
    KEEP_BY_EXPANDING = 2
    # like KEEP but never enlarges
    KEEP_NO_ENLARGE = 3


class AlignHorz(enum.IntEnum):
    IGNORE = 0x0000
    LEFT = 0x0001
    RIGHT = 0x0002
    CENTER = 0x0004


class AlignVert(enum.IntEnum):
    IGNORE = 0x0000
    TOP = 0x0010
    BOTTOM = 0x0020
    CENTER = 0x0040


class ScaleMode(enum.IntEnum):
    """Named bundles of an aspect ratio mode plus anchors.

    FIT: center within the target and resize to fit inside it.
    FILL: center within the target and resize to enclose it.
    CENTER: center on the target without changing size.
    STRETCH_TO_FILL: match the target's position and dimensions.
    FIT_NO_ENLARGE: like FIT, but only ever shrinks.
    """

    FIT = 0
    FILL = 1
    CENTER = 2
    STRETCH_TO_FILL = 3
    FIT_NO_ENLARGE = 4


def _parse(enum_type: Type[_E], name: str) -> _E:
    key = name.strip().upper().replace("-", "_")
    try:
        return enum_type[key]
    except KeyError:
        choices = ", ".join(m.name.lower() for m in enum_type)
        raise ValueError(
            f'Invalid {enum_type.__name__} "{name}", expected one of {choices}'
        ) from None


def parse_aspect_ratio_mode(name: str) -> AspectRatioMode:
    return _parse(AspectRatioMode, name)


def parse_align_horz(name: str) -> AlignHorz:
    return _parse(AlignHorz, name)


def parse_align_vert(name: str) -> AlignVert:
    return _parse(AlignVert, name)


def parse_scale_mode(name: str) -> ScaleMode:
    return _parse(ScaleMode, name)
