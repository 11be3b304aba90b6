"""
Tenant style directives

Pure mapping from tenant branding to CSS custom properties. Rendering
collaborators apply the result; nothing here touches shared state.
"""

import colorsys
import re
from typing import Optional

from tenant_auth.domain.entities import Tenant
from .dtos import StyleDirectives

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def hex_to_hsl(hex_color: Optional[str]) -> Optional[str]:
    """
    Convert "#RRGGBB" to the "H S% L%" form used by CSS variables.

    Returns None for anything that is not a six digit hex color.
    """
    if not hex_color:
        return None
    match = HEX_COLOR_PATTERN.match(hex_color.strip())
    if match is None:
        return None

    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    h, lightness, s = colorsys.rgb_to_hls(r, g, b)
    return f"{round(h * 360)} {round(s * 100)}% {round(lightness * 100)}%"


def build_style_directives(tenant: Tenant) -> StyleDirectives:
    css_variables = {}

    primary = hex_to_hsl(tenant.primary_color)
    if primary:
        css_variables["--tenant-primary"] = primary
        css_variables["--primary"] = primary

    secondary = hex_to_hsl(tenant.secondary_color)
    if secondary:
        css_variables["--tenant-secondary"] = secondary
        css_variables["--secondary"] = secondary

    return StyleDirectives(tenant_id=tenant.id, css_variables=css_variables)
