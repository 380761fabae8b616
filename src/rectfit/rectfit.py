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

"""Fit, fill or align one rectangle against another.

Usage:
rectfit.py --mode=fit 0,0,10,10 100,100,40,50
100,105,40,40

Rectangles are given as x,y,width,height. Put rectangles with a negative x
after "--" so they are not read as flags:
rectfit.py --mode=center -- -5,0,10,10 100,100,40,50
"""
from absl import app
from absl import flags
from absl import logging
from rectfit.alignment import (
    parse_align_horz,
    parse_align_vert,
    parse_aspect_ratio_mode,
    parse_scale_mode,
)
from rectfit.rectangle import Rectangle


FLAGS = flags.FLAGS


flags.DEFINE_enum(
    "mode",
    "fit",
    ["fit", "fill", "center", "stretch_to_fill", "fit_no_enlarge"],
    "How to scale the source rectangle onto the target.",
)
flags.DEFINE_enum(
    "aspect_mode",
    None,
    ["ignore", "keep", "keep_by_expanding", "keep_no_enlarge"],
    "If set, scale by aspect ratio mode and anchors instead of --mode.",
)
flags.DEFINE_enum(
    "horz_anchor", "center", ["ignore", "left", "right", "center"], "Target x anchor"
)
flags.DEFINE_enum(
    "vert_anchor", "center", ["ignore", "top", "bottom", "center"], "Target y anchor"
)
flags.DEFINE_enum(
    "self_horz_anchor",
    None,
    ["ignore", "left", "right", "center"],
    "Source x anchor (defaults to --horz_anchor)",
)
flags.DEFINE_enum(
    "self_vert_anchor",
    None,
    ["ignore", "top", "bottom", "center"],
    "Source y anchor (defaults to --vert_anchor)",
)
flags.DEFINE_bool("standardize", False, "Standardize the source before scaling")
flags.DEFINE_string("output_file", "-", "Output file ('-' means stdout)")


def ntos(n: float) -> str:
    # strip superflous .0 decimals
    return str(int(n)) if isinstance(n, float) and n.is_integer() else str(n)


def parse_rect(s: str) -> Rectangle:
    parts = s.replace(" ", ",").split(",")
    parts = [p for p in parts if p]
    if len(parts) != 4:
        raise ValueError(f'Expected "x,y,width,height", got "{s}"')
    try:
        return Rectangle(*(float(p) for p in parts))
    except ValueError:
        raise ValueError(f'Invalid number in rectangle "{s}"') from None


def format_rect(rect: Rectangle) -> str:
    return ",".join(ntos(v) for v in rect)


def _optional(parse_fn, value):
    return parse_fn(value) if value is not None else None


def fit(source: Rectangle, target: Rectangle) -> Rectangle:
    """Apply the flag-selected operation to source, in place."""
    if FLAGS.standardize:
        source.standardize()

    if FLAGS.aspect_mode is None:
        scale_mode = parse_scale_mode(FLAGS.mode)
        logging.info("scale_to %s onto %s, %s", source, target, scale_mode.name)
        return source.scale_to(target, scale_mode)

    aspect_mode = parse_aspect_ratio_mode(FLAGS.aspect_mode)
    anchors = (
        parse_align_horz(FLAGS.horz_anchor),
        parse_align_vert(FLAGS.vert_anchor),
        _optional(parse_align_horz, FLAGS.self_horz_anchor),
        _optional(parse_align_vert, FLAGS.self_vert_anchor),
    )
    logging.info(
        "scale_to_aspect %s onto %s, %s anchors %s",
        source,
        target,
        aspect_mode.name,
        [a.name if a is not None else None for a in anchors],
    )
    return source.scale_to_aspect(target, aspect_mode, *anchors)


def _run(argv):
    if len(argv) != 3:
        raise app.UsageError("Expected SOURCE and TARGET rectangles")

    try:
        source = parse_rect(argv[1])
        target = parse_rect(argv[2])
    except ValueError as e:
        raise app.UsageError(str(e))

    output = format_rect(fit(source, target))
    logging.info("result %s", output)

    if FLAGS.output_file == "-":
        print(output)
    else:
        with open(FLAGS.output_file, "w") as f:
            f.write(output + "\n")


def main(argv=None):
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run, argv=argv)


if __name__ == "__main__":
    main()
