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

from rectfit.alignment import *
import pytest


def test_anchor_values_are_distinct_bits():
    assert [int(a) for a in AlignHorz] == [0x0, 0x1, 0x2, 0x4]
    assert [int(a) for a in AlignVert] == [0x00, 0x10, 0x20, 0x40]


def test_enums_compare_to_ints():
    assert AspectRatioMode.KEEP_NO_ENLARGE == 3
    assert ScaleMode(4) is ScaleMode.FIT_NO_ENLARGE


@pytest.mark.parametrize(
    "parse_fn, name, expected_result",
    [
        (parse_aspect_ratio_mode, "keep", AspectRatioMode.KEEP),
        (parse_aspect_ratio_mode, "KEEP_BY_EXPANDING", AspectRatioMode.KEEP_BY_EXPANDING),
        (parse_aspect_ratio_mode, "keep-no-enlarge", AspectRatioMode.KEEP_NO_ENLARGE),
        (parse_align_horz, " Left ", AlignHorz.LEFT),
        (parse_align_horz, "ignore", AlignHorz.IGNORE),
        (parse_align_vert, "bottom", AlignVert.BOTTOM),
        (parse_scale_mode, "stretch_to_fill", ScaleMode.STRETCH_TO_FILL),
        (parse_scale_mode, "fit", ScaleMode.FIT),
    ],
)
def test_parse(parse_fn, name, expected_result):
    assert parse_fn(name) is expected_result


@pytest.mark.parametrize(
    "parse_fn, name",
    [
        (parse_align_horz, "top"),
        (parse_align_vert, "left"),
        (parse_scale_mode, ""),
        (parse_aspect_ratio_mode, "squash"),
    ],
)
def test_parse_invalid(parse_fn, name):
    with pytest.raises(ValueError, match="expected one of"):
        parse_fn(name)
