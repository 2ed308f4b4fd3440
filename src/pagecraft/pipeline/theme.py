"""Theme variables for compiled stylesheets."""

from pagecraft.models import Theme

RADIUS_MAP = {"sm": "4px", "md": "8px", "lg": "16px", "xl": "24px"}

FONT_MAP = {
    "system": "system-ui, -apple-system, 'Segoe UI', sans-serif",
    "mono": "'JetBrains Mono', 'Fira Code', 'Cascadia Code', monospace",
    "serif": "Georgia, 'Times New Roman', serif",
}

DARK_BG = "#0F172A"
DARK_TEXT = "#F1F5F9"

# (light, dark)
SURFACES = {
    "surface": ("#FFFFFF", "#1E293B"),
    "border": ("#E2E8F0", "#334155"),
    "text-2": ("#64748B", "#94A3B8"),
}


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#" + "".join(f"{max(0, min(255, round(v))):02x}" for v in (r, g, b))


def darken(value: str, pct: float) -> str:
    """Scale each channel toward black by ``pct`` percent."""
    r, g, b = hex_to_rgb(value)
    f = 1 - pct / 100
    return rgb_to_hex(r * f, g * f, b * f)


def lighten(value: str, pct: float) -> str:
    """Move each channel toward white by ``pct`` percent."""
    r, g, b = hex_to_rgb(value)
    f = pct / 100
    return rgb_to_hex(r + (255 - r) * f, g + (255 - g) * f, b + (255 - b) * f)


def theme_css(theme: Theme) -> str:
    """Render the ``:root`` design tokens for a theme."""
    dark = 1 if theme.mode == "dark" else 0
    lines = [
        f"  --primary: {theme.primary_color};",
        f"  --primary-dark: {darken(theme.primary_color, 15)};",
        f"  --primary-light: {lighten(theme.primary_color, 45)};",
        f"  --accent: {theme.secondary_color};",
        f"  --radius: {RADIUS_MAP.get(theme.radius, RADIUS_MAP['md'])};",
        f"  --font-sans: {FONT_MAP.get(theme.font, FONT_MAP['system'])};",
    ]
    surfaces = {
        "bg": DARK_BG if dark else theme.bg_color,
        "surface": SURFACES["surface"][dark],
        "border": SURFACES["border"][dark],
        "text": DARK_TEXT if dark else theme.text_color,
        "text-2": SURFACES["text-2"][dark],
    }
    lines += [f"  --{name}: {value};" for name, value in surfaces.items()]
    return ":root {\n" + "\n".join(lines) + "\n}"
