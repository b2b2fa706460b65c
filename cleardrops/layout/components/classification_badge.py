"""
cleardrops/layout/components/classification_badge.py
─────────────────────────────────────────────────────
Suitability badge and justification list.
"""
from dash import html

from cleardrops.analytics.justification import explain, reason_heading
from cleardrops.data.models import Reading
from config.water_quality import SUITABLE_COLOR, UNSUITABLE_COLOR

CARD_BG = "#161b22"
BORDER = "#30363d"


def classification_badge(reading: Reading) -> html.Span:
    # Anything other than "1" shows as unsuitable, even with zero reasons
    suitable = reading.is_suitable
    color = SUITABLE_COLOR if suitable else UNSUITABLE_COLOR
    return html.Span(
        "✅ Suitable" if suitable else "❌ Unsuitable",
        id="classification-badge",
        style={
            "fontSize": "1rem",
            "fontWeight": "700",
            "color": color,
            "border": f"1px solid {color}",
            "borderRadius": "4px",
            "padding": "2px 10px",
        },
    )


def classification_panel(reading: Reading) -> html.Div:
    reasons = explain(reading)
    color = SUITABLE_COLOR if reading.is_suitable else UNSUITABLE_COLOR
    return html.Div(
        [
            html.Div("Classification", className="chart-title"),
            classification_badge(reading),
            html.Div(
                [
                    html.H6(f"{reason_heading(reasons)}:", style={"color": color, "fontWeight": "600"}),
                    html.Ul([html.Li(reason) for reason in reasons], id="classification-reasons"),
                ],
                style={"marginTop": "14px"},
            ),
        ],
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderRadius": "8px",
            "padding": "16px",
        },
    )
