"""
cleardrops/layout/components/sensor_card.py
────────────────────────────────────────────
Single sensor value card.
"""
from dash import html

from cleardrops.layout.components.formatting import format_sensor_value

CARD_BG = "#161b22"
MUTED = "#8b949e"


def sensor_card(label: str, value: float | None, unit: str = "", color: str = "#c9d1d9") -> html.Div:
    """
    Args:
        label: Sensor name shown as the card title
        value: Normalized reading (None when the sensor was missing)
        unit: Unit suffix, e.g. "ppm"
        color: Title accent color
    """
    return html.Div(
        [
            html.Div(
                label,
                style={"fontSize": ".75rem", "color": color, "textTransform": "uppercase",
                       "letterSpacing": ".06em", "fontWeight": "700"},
            ),
            html.Div(
                format_sensor_value(value, unit),
                className="sensor-value",
                style={"fontSize": "1.6rem", "fontWeight": "700", "color": "#c9d1d9",
                       "lineHeight": "1.2", "marginTop": "6px"},
            ),
        ],
        style={
            "backgroundColor": CARD_BG,
            "border": "1px solid #30363d",
            "borderRadius": "8px",
            "padding": "16px",
            "height": "100%",
        },
    )
