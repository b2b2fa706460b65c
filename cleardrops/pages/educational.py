"""
cleardrops/pages/educational.py
───────────────────────────────
Educational content: what each parameter means, ideal ranges per plant type,
how to improve water quality and how the monitoring system works.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import pandas as pd
from dash import html

from config.water_quality import PLANT_RANGES

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"

# (icon + name, what it is, why it matters, ideal range)
PARAMETERS = [
    (
        "🌡️ Temperature",
        "Measures how hot or cold the water is.",
        "Water that's too hot or too cold can stress plant roots and affect nutrient absorption.",
        "Usually between 10°C – 25°C, depending on the plant species.",
    ),
    (
        "⚡ TDS (Total Dissolved Solids)",
        "TDS measures the concentration of dissolved substances in water, such as minerals, "
        "salts, and organic matter.",
        "Too many dissolved solids can harm plants by interfering with water and nutrient uptake.",
        "For most plants, 300–1000 ppm is acceptable. Sensitive plants may need even lower levels.",
    ),
    (
        "🧪 pH",
        "Indicates how acidic or alkaline the water is, on a scale of 0 to 14.",
        "The pH level affects how easily plants can absorb nutrients from soil and water.",
        "Typically 6.5 – 8.5 for most plants.",
    ),
    (
        "🌫️ Turbidity",
        "Measures how clear or cloudy the water is, caused by particles like silt, algae, "
        "or other organic materials.",
        "High turbidity can clog irrigation systems and signal the presence of harmful substances.",
        "The lower, the better. Turbidity should generally be below 5 NTU for irrigation.",
    ),
]

# (heading, [(sub-heading, [actions])])
GUIDELINES = [
    ("🌫️ Turbidity Reduction", [
        ("To Reduce High Turbidity:", [
            "Use mechanical filters such as mesh, sand, or cartridge filters.",
            "Allow water to settle in tanks before use to let suspended solids sink.",
            "Avoid using water from visibly murky or algae-contaminated sources.",
        ]),
    ]),
    ("🧪 pH Adjustment", [
        ("To Raise pH (if water is too acidic):", [
            "Apply agricultural lime (calcium carbonate) or potassium carbonate in measured quantities.",
        ]),
        ("To Lower pH (if water is too alkaline):", [
            "Use approved acidifying agents such as phosphoric acid, nitric acid, or citric acid.",
        ]),
    ]),
    ("⚡ Total Dissolved Solids (TDS) Management", [
        ("To Reduce High TDS:", [
            "Dilute with cleaner water sources.",
            "Use a reverse osmosis (RO) system to remove excess dissolved solids.",
        ]),
        ("To Increase Low TDS (nutrient-deficient water):", [
            "Add water-soluble fertilizers through fertigation, tailored to the crop's needs.",
        ]),
    ]),
    ("🌡️ Temperature Regulation", [
        ("To Lower Water Temperature:", [
            "Store water in shaded or underground containers to minimize heat absorption.",
            "Irrigate during early morning or late evening to reduce thermal stress on plants.",
        ]),
    ]),
]

METHODOLOGY = [
    ("📊 Data Collection",
     "The system continuously gathers water quality data from sensors measuring temperature, "
     "turbidity, pH, and TDS. These readings are stored in a database, creating a reliable "
     "dataset over time."),
    ("🧠 Model Training",
     "The collected data is preprocessed and divided into training and testing sets. A machine "
     "learning model is then trained to assess whether the water is suitable for plant "
     "irrigation, based on the patterns and thresholds within this data."),
    ("⏱️ Real-Time Assessment",
     "The trained model interprets new sensor readings in real time. If all readings are within "
     "safe limits, the water is marked as suitable for irrigation. If any reading exceeds its "
     "threshold, the water is flagged as unsuitable with a clear explanation of the issue."),
    ("🖥️ Web Application Display",
     "The dashboard shows the live sensor values, water suitability status, and any warnings "
     "with helpful insights."),
    ("🔄 Continuous Monitoring & Updates",
     "New sensor readings are regularly added to the database. To keep decisions consistent, "
     "these entries are reviewed but not used to retrain the model immediately."),
]


def _section(title: str, children: list) -> html.Div:
    return html.Div(
        [html.H4(title, style={"textAlign": "center", "fontWeight": "600", "marginBottom": "1rem"}), *children],
        className="chart-card",
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderRadius": "8px",
            "padding": "20px",
            "marginBottom": "1.5rem",
        },
    )


def plant_ranges_table() -> dbc.Table:
    df = pd.DataFrame(PLANT_RANGES)
    return dbc.Table.from_dataframe(df, striped=True, bordered=False, hover=True, color="dark", size="sm")


def _parameter_block(name: str, what: str, why: str, ideal: str) -> html.Div:
    return html.Div(
        [
            html.H5(name, style={"marginTop": "1rem"}),
            html.P([html.B("What it is"), f": {what}"]),
            html.P([html.B("Why it matters"), f": {why}"]),
            html.P([html.B("Ideal range"), f": {ideal}"]),
        ]
    )


def layout() -> html.Div:
    intro = _section("🌱 1. Introduction to Smart Irrigation", [
        html.P(
            "Smart irrigation is all about using technology to water plants more efficiently and "
            "sustainably. By monitoring water quality through sensors, we can make sure the water "
            "we use is actually good for the plants, helping them grow better, stay healthy, and "
            "avoid damage from poor-quality water."
        ),
        html.P(
            "Using temperature, TDS, pH, and turbidity sensors, the system gathers real-time data "
            "about the water being used. This information is then analyzed to determine whether the "
            "water is suitable for irrigation or if adjustments are needed."
        ),
    ])

    parameters = _section("💧 2. Understanding Water Quality Parameters", [
        html.P("Knowing what your sensor readings mean is key to making good irrigation decisions."),
        *[_parameter_block(*p) for p in PARAMETERS],
    ])

    plants = _section("🌿 3. Ideal Ranges for Different Plants", [
        html.P("Different plants have different needs. A quick guide to common plant types:"),
        plant_ranges_table(),
        html.P(
            [html.B("Tip: "), "Always check your specific plant's requirements when possible."],
            style={"color": MUTED, "fontSize": ".85rem"},
        ),
    ])

    guidelines = _section("🛠️ 4. Water Quality Improvement Guidelines", [
        html.Div(
            [
                html.H5(heading, style={"marginTop": "1rem"}),
                *[
                    html.Div([html.B(sub), html.Ul([html.Li(a) for a in actions])])
                    for sub, actions in groups
                ],
            ]
        )
        for heading, groups in GUIDELINES
    ])

    methodology = _section("⚙️ 5. System Methodology", [
        html.P(
            "The system combines sensor technology and machine learning to evaluate water quality "
            "for agricultural use:"
        ),
        *[html.Div([html.H5(title, style={"marginTop": "1rem"}), html.P(text)]) for title, text in METHODOLOGY],
    ])

    return html.Div(
        [
            html.Div(
                [
                    html.H2("Educational Content", className="page-title"),
                    html.P("Water quality for irrigation, explained", className="page-subtitle"),
                ],
                className="page-header",
            ),
            dbc.Row(
                [
                    dbc.Col([intro, parameters, plants], md=6),
                    dbc.Col([guidelines, methodology], md=6),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
