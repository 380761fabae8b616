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

"""Mutable axis-aligned rectangle with fit/fill/align helpers.

Mutating methods work in place and return self so calls can be chained:

    Rectangle(0, 0, 640, 480).scale_to(viewport, ScaleMode.FIT).translate_y(10)

Width and height may be negative (a "flipped" rectangle). Extent queries such
as min_x, area or top_left normalize through min/max/abs and never require
standardize() to be called first.
"""
import dataclasses
import math
from sys import float_info
from typing import Iterator, Optional
from rectfit.alignment import AlignHorz, AlignVert, AspectRatioMode, ScaleMode
from rectfit.geometric_types import (
    DEFAULT_ALMOST_EQUAL_TOLERANCE,
    Point,
    Vector,
    almost_equal,
)


def _divide(n: float, d: float) -> float:
    # IEEE-754 division; Python raises on / 0 where we want inf or nan
    if d == 0:
        if n == 0 or math.isnan(n):
            return math.nan
        return math.copysign(math.inf, n) * math.copysign(1.0, d)
    return n / d


@dataclasses.dataclass(eq=False)
class Rectangle:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.width, self.height))

    def copy(self) -> "Rectangle":
        return self.__class__(self.x, self.y, self.width, self.height)

    def set(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> "Rectangle":
        """Update the fields given, leave the ones passed as None untouched."""
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height
        return self

    def set_from_point(
        self,
        point: Point,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> "Rectangle":
        return self.set(point.x, point.y, width, height)

    def set_from_rect(self, other: "Rectangle") -> "Rectangle":
        return self.set(other.x, other.y, other.width, other.height)

    def set_from_corners(self, top_left: Point, bottom_right: Point) -> "Rectangle":
        """Span the two corners, whichever order they are given in.

        The result is always standardized.
        """
        x0 = min(top_left.x, bottom_right.x)
        x1 = max(top_left.x, bottom_right.x)
        y0 = min(top_left.y, bottom_right.y)
        y1 = max(top_left.y, bottom_right.y)
        return self.set(x0, y0, x1 - x0, y1 - y0)

    def set_from_center(
        self, cx: float, cy: float, width: float, height: float
    ) -> "Rectangle":
        return self.set_from_center_point(Point(cx, cy), width, height)

    def set_from_center_point(
        self, center: Point, width: float, height: float
    ) -> "Rectangle":
        top_left = center - Vector(width, height) * 0.5
        return self.set_from_point(top_left, width, height)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @position.setter
    def position(self, point: Point):
        self.x = point.x
        self.y = point.y

    @property
    def size(self) -> Vector:
        return Vector(self.width, self.height)

    @size.setter
    def size(self, extent: Vector):
        self.width = extent.x
        self.height = extent.y

    def translate_x(self, dx: float) -> "Rectangle":
        self.x += dx
        return self

    def translate_y(self, dy: float) -> "Rectangle":
        self.y += dy
        return self

    def translate(self, dx: float, dy: float) -> "Rectangle":
        return self.translate_x(dx).translate_y(dy)

    def translate_by(self, v: Vector) -> "Rectangle":
        self.position = self.position + v
        return self

    def __iadd__(self, other: Vector) -> "Rectangle":
        if isinstance(other, Vector):
            return self.translate_by(other)
        return NotImplemented

    def __isub__(self, other: Vector) -> "Rectangle":
        if isinstance(other, Vector):
            return self.translate_by(-other)
        return NotImplemented

    def scale_width(self, sx: float) -> "Rectangle":
        self.width *= sx
        return self

    def scale_height(self, sy: float) -> "Rectangle":
        self.height *= sy
        return self

    def scale_xy(self, sx: float, sy: float) -> "Rectangle":
        return self.scale_width(sx).scale_height(sy)

    def scale(self, s: float) -> "Rectangle":
        return self.scale_xy(s, s)

    def scale_by(self, v: Vector) -> "Rectangle":
        return self.scale_xy(v.x, v.y)

    def scale_from_center_xy(self, sx: float, sy: float) -> "Rectangle":
        """Scale width and height while keeping the center where it is."""
        if almost_equal(sx, 1.0) and almost_equal(sy, 1.0):
            return self

        new_width = self.width * sx
        new_height = self.height * sy

        center = self.center
        self.x = center.x - new_width / 2
        self.y = center.y - new_height / 2
        self.width = new_width
        self.height = new_height
        return self

    def scale_from_center(self, s: float) -> "Rectangle":
        return self.scale_from_center_xy(s, s)

    def scale_from_center_by(self, v: Vector) -> "Rectangle":
        return self.scale_from_center_xy(v.x, v.y)

    def scale_to_aspect(
        self,
        target: "Rectangle",
        aspect_mode: AspectRatioMode,
        target_horz_anchor: Optional[AlignHorz] = None,
        target_vert_anchor: Optional[AlignVert] = None,
        self_horz_anchor: Optional[AlignHorz] = None,
        self_vert_anchor: Optional[AlignVert] = None,
    ) -> "Rectangle":
        """Resize self relative to target, then align the two.

        Target anchors default to CENTER; self anchors default to the
        corresponding target anchor, so passing only the target pair aligns
        like-with-like (left to left, top to top and so on).

        KEEP and KEEP_NO_ENLARGE scale uniformly so self fits inside target,
        KEEP_NO_ENLARGE only when self is larger than target on some axis.
        KEEP_BY_EXPANDING scales uniformly so self covers target. IGNORE, and
        any value that is not one of the above, copies target's width and
        height. Alignment happens even when the size did not change.
        """
        if target_horz_anchor is None:
            target_horz_anchor = AlignHorz.CENTER
        if target_vert_anchor is None:
            target_vert_anchor = AlignVert.CENTER
        if self_horz_anchor is None:
            self_horz_anchor = target_horz_anchor
        if self_vert_anchor is None:
            self_vert_anchor = target_vert_anchor

        tw, th = target.width, target.height
        sw, sh = self.width, self.height

        if aspect_mode in (
            AspectRatioMode.KEEP,
            AspectRatioMode.KEEP_BY_EXPANDING,
            AspectRatioMode.KEEP_NO_ENLARGE,
        ):
            if aspect_mode != AspectRatioMode.KEEP_NO_ENLARGE or sw > tw or sh > th:
                if abs(sw) >= float_info.epsilon or abs(sh) >= float_info.epsilon:
                    w_ratio = _divide(abs(tw), abs(sw))
                    h_ratio = _divide(abs(th), abs(sh))
                    if math.isnan(w_ratio) or math.isnan(h_ratio):
                        # nan wins either way round, as with IEEE-754 min/max
                        self.scale(math.nan)
                    elif aspect_mode == AspectRatioMode.KEEP_BY_EXPANDING:
                        self.scale(max(w_ratio, h_ratio))
                    else:
                        self.scale(min(w_ratio, h_ratio))
        else:
            self.width = tw
            self.height = th

        return self.align_to_rect(
            target,
            target_horz_anchor,
            target_vert_anchor,
            self_horz_anchor,
            self_vert_anchor,
        )

    def scale_to(
        self, target: "Rectangle", scale_mode: ScaleMode = ScaleMode.FIT
    ) -> "Rectangle":
        if scale_mode == ScaleMode.FIT:
            return self.scale_to_aspect(
                target, AspectRatioMode.KEEP, AlignHorz.CENTER, AlignVert.CENTER
            )
        elif scale_mode == ScaleMode.FIT_NO_ENLARGE:
            return self.scale_to_aspect(
                target,
                AspectRatioMode.KEEP_NO_ENLARGE,
                AlignHorz.CENTER,
                AlignVert.CENTER,
            )
        elif scale_mode == ScaleMode.FILL:
            return self.scale_to_aspect(
                target,
                AspectRatioMode.KEEP_BY_EXPANDING,
                AlignHorz.CENTER,
                AlignVert.CENTER,
            )
        elif scale_mode == ScaleMode.CENTER:
            return self.align_to_rect(target, AlignHorz.CENTER, AlignVert.CENTER)
        elif scale_mode == ScaleMode.STRETCH_TO_FILL:
            return self.scale_to_aspect(
                target, AspectRatioMode.IGNORE, AlignHorz.CENTER, AlignVert.CENTER
            )
        return self.scale_to_aspect(target, AspectRatioMode.KEEP)

    def get_horz_anchor(self, anchor: AlignHorz) -> float:
        if anchor == AlignHorz.LEFT:
            return self.left
        elif anchor == AlignHorz.RIGHT:
            return self.right
        elif anchor == AlignHorz.CENTER:
            return self.center.x
        return 0.0

    def get_vert_anchor(self, anchor: AlignVert) -> float:
        if anchor == AlignVert.TOP:
            return self.top
        elif anchor == AlignVert.BOTTOM:
            return self.bottom
        elif anchor == AlignVert.CENTER:
            return self.center.y
        return 0.0

    def align_to_horz(
        self, target_x: float, self_anchor: AlignHorz = AlignHorz.CENTER
    ) -> "Rectangle":
        """Move horizontally so self_anchor lands on target_x."""
        if self_anchor != AlignHorz.IGNORE:
            self.translate_x(target_x - self.get_horz_anchor(self_anchor))
        return self

    def align_to_vert(
        self, target_y: float, self_anchor: AlignVert = AlignVert.CENTER
    ) -> "Rectangle":
        """Move vertically so self_anchor lands on target_y."""
        if self_anchor != AlignVert.IGNORE:
            self.translate_y(target_y - self.get_vert_anchor(self_anchor))
        return self

    def align_to_horz_rect(
        self,
        target: "Rectangle",
        target_anchor: Optional[AlignHorz] = None,
        self_anchor: Optional[AlignHorz] = None,
    ) -> "Rectangle":
        if target_anchor is None:
            target_anchor = AlignHorz.CENTER
        if self_anchor is None:
            self_anchor = target_anchor
        if target_anchor != AlignHorz.IGNORE and self_anchor != AlignHorz.IGNORE:
            self.align_to_horz(target.get_horz_anchor(target_anchor), self_anchor)
        return self

    def align_to_vert_rect(
        self,
        target: "Rectangle",
        target_anchor: Optional[AlignVert] = None,
        self_anchor: Optional[AlignVert] = None,
    ) -> "Rectangle":
        if target_anchor is None:
            target_anchor = AlignVert.CENTER
        if self_anchor is None:
            self_anchor = target_anchor
        if target_anchor != AlignVert.IGNORE and self_anchor != AlignVert.IGNORE:
            self.align_to_vert(target.get_vert_anchor(target_anchor), self_anchor)
        return self

    def align_to_point(
        self, point: Point, self_horz_anchor: AlignHorz, self_vert_anchor: AlignVert
    ) -> "Rectangle":
        self.align_to_horz(point.x, self_horz_anchor)
        return self.align_to_vert(point.y, self_vert_anchor)

    def align_to_rect(
        self,
        target: "Rectangle",
        target_horz_anchor: Optional[AlignHorz] = None,
        target_vert_anchor: Optional[AlignVert] = None,
        self_horz_anchor: Optional[AlignHorz] = None,
        self_vert_anchor: Optional[AlignVert] = None,
    ) -> "Rectangle":
        """Align both axes; anchors default as in scale_to_aspect."""
        if target_horz_anchor is None:
            target_horz_anchor = AlignHorz.CENTER
        if target_vert_anchor is None:
            target_vert_anchor = AlignVert.CENTER
        self.align_to_horz_rect(target, target_horz_anchor, self_horz_anchor)
        return self.align_to_vert_rect(target, target_vert_anchor, self_vert_anchor)

    def inside_xy(self, x: float, y: float) -> bool:
        """True if (x, y) is strictly inside; points on an edge are outside."""
        return self.min_x < x < self.max_x and self.min_y < y < self.max_y

    def inside_point(self, point: Point) -> bool:
        return self.inside_xy(point.x, point.y)

    def inside_rect(self, other: "Rectangle") -> bool:
        return self.inside_xy(other.min_x, other.min_y) and self.inside_xy(
            other.max_x, other.max_y
        )

    def inside_line(self, p0: Point, p1: Point) -> bool:
        return self.inside_point(p0) and self.inside_point(p1)

    def _set_bounds(
        self, x0: float, y0: float, x1: float, y1: float
    ) -> "Rectangle":
        return self.set(x0, y0, x1 - x0, y1 - y0)

    def grow_to_include_xy(self, x: float, y: float) -> "Rectangle":
        return self._set_bounds(
            min(self.min_x, x),
            min(self.min_y, y),
            max(self.max_x, x),
            max(self.max_y, y),
        )

    def grow_to_include_point(self, point: Point) -> "Rectangle":
        return self.grow_to_include_xy(point.x, point.y)

    def grow_to_include_rect(self, other: "Rectangle") -> "Rectangle":
        return self._set_bounds(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def grow_to_include_line(self, p0: Point, p1: Point) -> "Rectangle":
        return self.grow_to_include_point(p0).grow_to_include_point(p1)

    def intersection(self, other: "Rectangle") -> "Rectangle":
        """Return the overlap of self and other as a new Rectangle.

        Disjoint rectangles give the zero rectangle, Rectangle(0, 0, 0, 0).
        Rectangles that merely touch give a zero-width or zero-height
        rectangle on the shared edge.
        """
        x0 = max(self.min_x, other.min_x)
        x1 = min(self.max_x, other.max_x)
        if x1 - x0 < 0:
            return self.__class__()

        y0 = max(self.min_y, other.min_y)
        y1 = min(self.max_y, other.max_y)
        if y1 - y0 < 0:
            return self.__class__()

        return self.__class__(x0, y0, x1 - x0, y1 - y0)

    def union(self, other: "Rectangle") -> "Rectangle":
        """Return the bounding box of self and other; neither is modified."""
        return self.copy().grow_to_include_rect(other)

    def standardize(self) -> "Rectangle":
        """Flip negative dimensions so width, height >= 0 covering the same area."""
        if self.width < 0:
            self.x += self.width
            self.width = -self.width
        if self.height < 0:
            self.y += self.height
            self.height = -self.height
        return self

    @property
    def is_standardized(self) -> bool:
        return self.width >= 0 and self.height >= 0

    @property
    def area(self) -> float:
        return abs(self.width) * abs(self.height)

    @property
    def perimeter(self) -> float:
        return 2 * abs(self.width) + 2 * abs(self.height)

    @property
    def aspect_ratio(self) -> float:
        """|width| / |height|; inf (or nan for an empty rect) when height is 0."""
        return _divide(abs(self.width), abs(self.height))

    @property
    def is_empty(self) -> bool:
        return almost_equal(self.width, 0.0) and almost_equal(self.height, 0.0)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def min(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def max(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def left(self) -> float:
        return self.min_x

    @property
    def right(self) -> float:
        return self.max_x

    @property
    def top(self) -> float:
        return self.min_y

    @property
    def bottom(self) -> float:
        return self.max_y

    @property
    def top_left(self) -> Point:
        return self.min

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return self.max

    @property
    def center(self) -> Point:
        return self.position + 0.5 * self.size

    def almost_equals(
        self, other: "Rectangle", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE
    ) -> bool:
        return all(almost_equal(a, b, tolerance) for a, b in zip(self, other))

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.almost_equals(other)
