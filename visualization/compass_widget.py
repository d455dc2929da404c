"""
Compass Widget — sidebar SVG rose showing the prevailing wind of a month.

Rendered via st.components.v1.html(); display-only.
"""

import math


def _polar(cx: float, cy: float, radius: float, deg: float):
    rad = math.radians(deg)
    return cx + radius * math.sin(rad), cy - radius * math.cos(rad)


def compass_html(
    direction_deg: float,
    speed: float,
    caption: str = "",
    size: int = 180,
) -> str:
    """
    Return an HTML string containing an SVG compass rose.

    The needle points along ``direction_deg`` (compass degrees, 0 = north,
    clockwise), the hub shows the speed.

    Args:
        direction_deg: Prevailing direction in compass degrees.
        speed: Mean speed in m/s.
        caption: Optional text under the rose (e.g. the month label).
        size: Pixel width/height of the compass.

    Returns:
        HTML string with embedded SVG.
    """
    cx = cy = size / 2
    r = size / 2 - 14

    ticks = []
    for deg in range(0, 360, 15):
        major = deg % 90 == 0
        x1, y1 = _polar(cx, cy, r - (12 if major else 5), deg)
        x2, y2 = _polar(cx, cy, r, deg)
        ticks.append(
            f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
            f'stroke="{"#1e3a5f" if major else "#93c5fd"}" stroke-width="{2 if major else 1}"/>'
        )

    labels = []
    for label, deg in (("N", 0), ("E", 90), ("S", 180), ("W", 270)):
        lx, ly = _polar(cx, cy, r - 24, deg)
        labels.append(
            f'<text x="{lx:.1f}" y="{ly:.1f}" text-anchor="middle" '
            f'dominant-baseline="central" fill="#1e3a5f" font-size="12" '
            f'font-weight="bold" font-family="sans-serif">{label}</text>'
        )

    tip = _polar(cx, cy, r - 32, direction_deg)
    tail = _polar(cx, cy, 14, direction_deg + 180.0)
    left = _polar(tip[0], tip[1], 14, direction_deg + 155.0)
    right = _polar(tip[0], tip[1], 14, direction_deg - 155.0)
    needle = (
        f'<line x1="{tail[0]:.1f}" y1="{tail[1]:.1f}" x2="{tip[0]:.1f}" y2="{tip[1]:.1f}" '
        f'stroke="#3b82f6" stroke-width="3" stroke-linecap="round"/>'
        f'<polygon points="{tip[0]:.1f},{tip[1]:.1f} {left[0]:.1f},{left[1]:.1f} '
        f'{right[0]:.1f},{right[1]:.1f}" fill="#3b82f6"/>'
    )

    hub = (
        f'<circle cx="{cx}" cy="{cy}" r="19" fill="#ffffff" stroke="#3b82f6" stroke-width="1.5"/>'
        f'<text x="{cx}" y="{cy - 3}" text-anchor="middle" dominant-baseline="central" '
        f'fill="#1e3a5f" font-size="11" font-weight="bold" font-family="sans-serif">'
        f'{speed:.1f}</text>'
        f'<text x="{cx}" y="{cy + 10}" text-anchor="middle" dominant-baseline="central" '
        f'fill="#6b7280" font-size="8" font-family="sans-serif">m/s</text>'
    )

    footer = (
        f'<text x="{cx}" y="{size - 1}" text-anchor="middle" fill="#6b7280" '
        f'font-size="10" font-family="sans-serif">'
        f'{caption + " | " if caption else ""}{direction_deg:.0f}°</text>'
    )

    svg = (
        f'<svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">'
        f'<rect width="{size}" height="{size}" rx="8" fill="#f8fafc"/>'
        f'<circle cx="{cx}" cy="{cy}" r="{r:.1f}" fill="none" stroke="#93c5fd" stroke-width="1.5"/>'
        f'{"".join(ticks)}{"".join(labels)}{needle}{hub}{footer}'
        f'</svg>'
    )
    return f'<div style="display:flex;justify-content:center;">{svg}</div>'
