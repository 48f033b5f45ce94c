# dance_timeline/render/svg.py

"""Minimal SVG markup helpers."""

from __future__ import annotations

import html


def _esc(text: object) -> str:
    """XML-escape a value for text content or attributes."""
    return html.escape(str(text), quote=True)


def _num(value: float) -> str:
    """Format a coordinate without trailing zeros."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def svg_open(width: int, height: int) -> str:
    return (
        f"<svg viewBox='0 0 {width} {height}' width='100%' height='100%' "
        "xmlns='http://www.w3.org/2000/svg'>"
    )


def svg_close() -> str:
    return "</svg>"


def svg_text(text: str, x: float, y: float) -> str:
    return f"<text x='{_num(x)}' y='{_num(y)}'>\n{_esc(text)}\n</text>"


def svg_line(x1: float, y1: float, x2: float, y2: float, stroke: str) -> str:
    return (
        f"<line x1='{_num(x1)}' y1='{_num(y1)}' x2='{_num(x2)}' y2='{_num(y2)}' "
        f"stroke='{_esc(stroke)}'/>"
    )


def svg_circle(cx: float, cy: float, r: float, color: str) -> str:
    return (
        f"<circle cx='{_num(cx)}' cy='{_num(cy)}' r='{_num(r)}' "
        f"stroke='{_esc(color)}' fill='{_esc(color)}'/>"
    )
