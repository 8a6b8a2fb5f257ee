from __future__ import annotations
import base64
import math
import re
from enum import Enum
from typing import Optional, Sequence, Union
from xml.sax.saxutils import escape

from imagine_gen.core.errors import InvalidArgument
from imagine_gen.core.rng import RNG, Seed, rng_from
from imagine_gen.core.seed import get_global_rng
from imagine_gen.core.utils import fmt_num

FONT_STACK = "system-ui, -apple-system, Segoe UI, Roboto, Ubuntu, Cantarell, Noto Sans, Helvetica, Arial, sans-serif"
BRIGHT_PALETTE = ("#0ea5e9", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6")
GRAY_PALETTE = ("#f5f5f5", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280")

AVATAR_STYLES = ("identicon", "initials", "rings", "blocks")
PATTERN_TYPES = ("triangles", "grid", "dots", "waves", "hex")
SHAPE_KINDS = ("rect", "circle", "line", "poly")


class ImageOut(str, Enum):
    STRING = "string"
    BUFFER = "buffer"
    DATA_URL = "dataUrl"


def to_output(svg: str, kind: Union[ImageOut, str] = ImageOut.STRING) -> Union[str, bytes]:
    """Convert SVG markup to the requested output kind."""
    kind = ImageOut(kind)
    if kind is ImageOut.STRING:
        return svg
    data = svg.encode("utf-8")
    if kind is ImageOut.BUFFER:
        return data
    return "data:image/svg+xml;base64," + base64.b64encode(data).decode("ascii")


def svg_wrap(width, height, body: str, oneline: bool = False) -> str:
    content = re.sub(r"\n+", "", body) if oneline else body
    w, h = fmt_num(width), fmt_num(height)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">'
        f"{content}</svg>"
    )


def _choice(name: str, value: str, allowed: Sequence[str]) -> str:
    if value not in allowed:
        raise InvalidArgument(f"{name} must be one of {', '.join(allowed)}; got {value!r}")
    return value


def _mirrored_cells(rng: RNG, size: int, rows: int, palette, fixed: Optional[str]) -> str:
    # left three columns are drawn, then mirrored onto the right edge
    cell = math.floor(size / rows)
    out = []
    for y in range(rows):
        for x in range(3):
            color = fixed if fixed is not None else rng.pick(palette)
            if rng.next() < 0.5:
                continue
            px, py = x * cell, y * cell
            out.append(f'<rect x="{px}" y="{py}" width="{cell}" height="{cell}" fill="{color}"/>')
            out.append(f'<rect x="{size - px - cell}" y="{py}" width="{cell}" height="{cell}" fill="{color}"/>')
    return "".join(out)


def avatar(*, seed: Optional[Seed] = None, size: int = 96, style: str = "identicon",
           initials: Optional[str] = None, palette: Optional[Sequence[str]] = None,
           as_: Union[ImageOut, str] = ImageOut.STRING, oneline: bool = False):
    """Deterministic square avatar: identicon, initials, rings or blocks."""
    rng = rng_from(seed, get_global_rng())
    _choice("style", style, AVATAR_STYLES)
    palette = tuple(palette or BRIGHT_PALETTE)
    bg = rng.pick(palette)
    body = f'<rect width="100%" height="100%" fill="{bg}"/>'
    if style == "initials":
        text = escape((initials or "AA")[:2].upper())
        body += (f'<text x="50%" y="56%" dominant-baseline="middle" text-anchor="middle" '
                 f'font-size="{math.floor(size * 0.5)}" font-family="{FONT_STACK}" fill="#fff">{text}</text>')
    elif style == "rings":
        rings = 3 + math.floor(rng.next() * 3)
        stroke = max(2, math.floor(size * 0.03))
        for i in range(rings):
            r = math.floor((size / 2) * (0.2 + 0.7 * (i / rings)))
            color = rng.pick(palette)
            body += (f'<circle cx="{fmt_num(size / 2)}" cy="{fmt_num(size / 2)}" r="{r}" fill="none" '
                     f'stroke="{color}" stroke-width="{stroke}"/>')
    elif style == "blocks":
        body += _mirrored_cells(rng, size, 6, palette, None)
    else:
        fg = rng.pick(palette)
        body += _mirrored_cells(rng, size, 5, palette, fg)
    return to_output(svg_wrap(size, size, body, oneline), as_)


def _accent(rng: RNG, palette) -> str:
    # palette[0] is the background; accents come from the rest
    return palette[1 + math.floor(rng.next() * (len(palette) - 1))]


def pattern(*, seed: Optional[Seed] = None, width: int = 320, height: int = 180, type: str = "triangles",
            palette: Optional[Sequence[str]] = None, as_: Union[ImageOut, str] = ImageOut.STRING,
            oneline: bool = False):
    """Background pattern: triangles, grid, dots, waves or hex tiling."""
    rng = rng_from(seed, get_global_rng())
    _choice("type", type, PATTERN_TYPES)
    palette = tuple(palette or GRAY_PALETTE)
    if len(palette) < 2:
        raise InvalidArgument("pattern: palette needs a background and at least one accent")
    parts = [f'<rect width="100%" height="100%" fill="{palette[0]}"/>']
    if type == "grid":
        cell = 20
        for y in range(0, height, cell):
            for x in range(0, width, cell):
                if rng.next() < 0.5:
                    continue
                parts.append(f'<rect x="{x}" y="{y}" width="{cell}" height="{cell}" fill="{_accent(rng, palette)}"/>')
    elif type == "dots":
        r = 3
        for y in range(r, height, 12):
            for x in range(r, width, 12):
                parts.append(f'<circle cx="{x}" cy="{y}" r="{r}" fill="{_accent(rng, palette)}"/>')
    elif type == "waves":
        rows, amp = 8, 6
        step = width / 20
        band = height / rows
        for row in range(rows):
            color = _accent(rng, palette)
            d = []
            x = 0.0
            while x <= width:
                y = band * row + band / 2 + math.sin((x / width) * math.pi * 2) * amp
                d.append(f"{'M' if x == 0 else 'L'}{fmt_num(x)},{fmt_num(y)} ")
                x += step
            parts.append(f'<path d="{"".join(d)}" stroke="{color}" stroke-width="2" fill="none"/>')
    elif type == "hex":
        s = 8
        h = math.sin(math.pi / 3) * s
        y = 0.0
        while y < height + s:
            x = 0.0
            while x < width + s:
                cx = x + (0.75 * s if math.floor(y / (2 * h)) % 2 else 0)
                cy = y
                color = _accent(rng, palette)
                corners = [(cx - s / 2, cy - h), (cx + s / 2, cy - h), (cx + s, cy),
                           (cx + s / 2, cy + h), (cx - s / 2, cy + h), (cx - s, cy)]
                points = " ".join(f"{fmt_num(px)},{fmt_num(py)}" for px, py in corners)
                parts.append(f'<polygon points="{points}" fill="{color}"/>')
                x += 1.5 * s
            y += 2 * h
    else:
        for _ in range(200):
            x1 = math.floor(rng.next() * width)
            y1 = math.floor(rng.next() * height)
            x2 = math.floor(rng.next() * width)
            y2 = math.floor(rng.next() * height)
            x3 = math.floor(rng.next() * width)
            y3 = math.floor(rng.next() * height)
            color = _accent(rng, palette)
            parts.append(f'<polygon points="{x1},{y1} {x2},{y2} {x3},{y3}" fill="{color}" opacity="0.7"/>')
    return to_output(svg_wrap(width, height, "".join(parts), oneline), as_)


def placeholder(width, height, *, text: Optional[str] = None, bg: str = "#e5e7eb", fg: str = "#111827",
                as_: Union[ImageOut, str] = ImageOut.STRING, oneline: bool = False):
    for v in (width, height):
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
            raise InvalidArgument("placeholder: width/height must be finite numbers")
    label = escape(text if text is not None else f"{fmt_num(width)}×{fmt_num(height)}")
    body = (f'<rect width="100%" height="100%" fill="{bg}"/>'
            f'<text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" '
            f'font-size="{math.floor(min(width, height) / 5)}" font-family="{FONT_STACK}" fill="{fg}">{label}</text>')
    return to_output(svg_wrap(width, height, body, oneline), as_)


def initials(text: str, *, size: int = 96, bg: str = "#10b981", fg: str = "#ffffff",
             font_family: str = FONT_STACK, as_: Union[ImageOut, str] = ImageOut.STRING,
             oneline: bool = False):
    label = escape((text or "AA")[:2].upper())
    body = (f'<rect width="100%" height="100%" fill="{bg}"/>'
            f'<text x="50%" y="56%" dominant-baseline="middle" text-anchor="middle" '
            f'font-size="{math.floor(size * 0.5)}" font-family="{font_family}" fill="{fg}">{label}</text>')
    return to_output(svg_wrap(size, size, body, oneline), as_)


def shape_set(*, seed: Optional[Seed] = None, width: int = 320, height: int = 180,
              shapes: Sequence[str] = ("rect", "circle", "line"), count: int = 30,
              palette: Optional[Sequence[str]] = None, as_: Union[ImageOut, str] = ImageOut.STRING,
              oneline: bool = False):
    rng = rng_from(seed, get_global_rng())
    for kind in shapes:
        _choice("shape", kind, SHAPE_KINDS)
    palette = tuple(palette or BRIGHT_PALETTE)
    parts = ['<rect width="100%" height="100%" fill="#ffffff"/>']
    for _ in range(count):
        kind = rng.pick(shapes)
        color = rng.pick(palette)
        if kind == "rect":
            x = math.floor(rng.next() * width)
            y = math.floor(rng.next() * height)
            w = math.floor(rng.next() * (width / 3))
            h = math.floor(rng.next() * (height / 3))
            parts.append(f'<rect x="{x}" y="{y}" width="{w}" height="{h}" fill="{color}" opacity="0.7"/>')
        elif kind == "circle":
            cx = math.floor(rng.next() * width)
            cy = math.floor(rng.next() * height)
            r = math.floor(rng.next() * min(width, height) / 6)
            parts.append(f'<circle cx="{cx}" cy="{cy}" r="{r}" fill="{color}" opacity="0.7"/>')
        elif kind == "line":
            x1 = math.floor(rng.next() * width)
            y1 = math.floor(rng.next() * height)
            x2 = math.floor(rng.next() * width)
            y2 = math.floor(rng.next() * height)
            parts.append(f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" stroke="{color}" stroke-width="2"/>')
        else:
            n = 3 + math.floor(rng.next() * 5)
            points = []
            for _ in range(n):
                points.append(f"{math.floor(rng.next() * width)},{math.floor(rng.next() * height)}")
            parts.append(f'<polygon points="{" ".join(points)}" fill="{color}" opacity="0.6"/>')
    return to_output(svg_wrap(width, height, "".join(parts), oneline), as_)
