"""
Web application for Spring-Damper Integration Comparison

Interactive dashboard to compare integrators against the closed-form solution.
"""

from typing import Any, Dict, List

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import numpy as np
import plotly.express as px
import plotly.graph_objs as go

from oscillator import INTEGRATORS, DynamicsParams, SpringDamper, compare_integrators


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Spring-Damper Integration Comparison"

MAX_STEPS = 200000


def _number_input(label: str, input_id: str, value: float, **limits: float) -> html.Div:
    """Labelled numeric input laid out inline with the other controls"""
    return html.Div([
        html.Label(label, style={"fontWeight": "bold", "marginBottom": "5px"}),
        dcc.Input(id=input_id, type="number", value=value, style={"width": "100%", "padding": "8px"}, **limits),
    ], style={"width": "15%", "display": "inline-block", "marginRight": "20px"})


def validate_inputs(
    dt: float | None, k: float | None, b: float | None, horizon: float | None, integrators: List[str]
) -> str | None:
    """Return an error message for unusable dashboard inputs, None when they are usable"""
    if not integrators:
        return "Select at least one integrator."
    if dt is None or k is None or b is None or horizon is None:
        return "dt, k, b and horizon are all required."
    if dt <= 0:
        return "dt must be positive."
    if horizon / dt > MAX_STEPS:
        return f"Horizon / dt must not exceed {MAX_STEPS} steps."
    return None


# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Spring-Damper Integration Comparison",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            _number_input("Time Step dt (s):", "dt-input", 0.01, min=0.001, max=1.0, step=0.001),
            _number_input("Spring Constant k (N/m):", "k-input", 15.0, min=0.0, step=0.5),
            _number_input("Damping b (N·s/m):", "b-input", 0.0, min=0.0, step=0.05),
            _number_input("Horizon (s):", "horizon-input", 20.0, min=1.0, max=200.0, step=1.0),

            html.Button('Run Simulation', id='run-button',
                       style={'width': '20%', 'padding': '10px', 'fontSize': '16px',
                              'backgroundColor': '#4CAF50', 'color': 'white',
                              'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),

            dcc.Checklist(
                id='integrator-input',
                options=[{'label': name, 'value': name} for name in INTEGRATORS],
                value=list(INTEGRATORS),
                inline=True,
                style={'marginTop': '15px'}
            ),
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),

        dcc.Loading(
            id="loading",
            type="default",
            children=[
                html.Div(id='results-container')
            ]
        )
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


@app.callback(
    [Output("results-container", "children"), Output("status-message", "children")],
    [Input("run-button", "n_clicks")],
    [
        State("dt-input", "value"),
        State("k-input", "value"),
        State("b-input", "value"),
        State("horizon-input", "value"),
        State("integrator-input", "value"),
    ],
)
def update_results(
    n_clicks: int | None,
    dt: float | None,
    k: float | None,
    b: float | None,
    horizon: float | None,
    integrators: List[str],
) -> tuple[Any, Any]:
    """Run simulation and update results"""
    if n_clicks is None:
        raise PreventUpdate

    error = validate_inputs(dt, k, b, horizon, integrators)
    if error is not None:
        return [], html.Div(f"Error: {error}", style={"color": "red"})

    try:
        params = DynamicsParams(mass=1.0, spring_constant=k, damping=b)
        results = compare_integrators(integrators, params=params, dt=dt, horizon=horizon)
    except ValueError as e:
        return [], html.Div(f"Error: {e}", style={"color": "red"})

    status_msg = html.Div(
        f"Simulation complete! Compared {len(integrators)} integrators.",
        style={"color": "green"},
    )
    return create_results_layout(results, params), status_msg


def create_results_layout(
    results: Dict[str, Dict[str, Any]], params: DynamicsParams
) -> html.Div:
    """Create the results visualization layout"""
    names = list(results)
    colors = px.colors.qualitative.Set1
    reference_label = "analytic" if params.is_undamped else "reference (odeint)"

    # 1. Position over time, with the reference curve
    fig1 = go.Figure()
    first = results[names[0]]
    fig1.add_trace(
        go.Scatter(
            x=first["time"],
            y=first["reference"][:, 0],
            mode="lines",
            name=reference_label,
            line=dict(color="black", width=1, dash="dash"),
        )
    )
    for i, name in enumerate(names):
        t = results[name]["time"]
        position = results[name]["state"][:, 0]
        fig1.add_trace(
            go.Scatter(
                x=t,
                y=position,
                mode="lines",
                name=name,
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"{name}<br>Time: %{{x:.2f}}s<br>Position: %{{y:.3f}}<extra></extra>",
            )
        )

    fig1.update_layout(
        title="Position Over Time",
        xaxis_title="Time (s)",
        yaxis_title="Position",
        hovermode="closest",
        height=400,
        template="plotly_white",
    )

    # 2. Energy over time, normalized to the initial energy
    fig2 = go.Figure()
    model = SpringDamper(params)
    for i, name in enumerate(names):
        t = results[name]["time"]
        x = results[name]["state"][:, 0]
        v = results[name]["state"][:, 1]
        energy = model.energy(x, v)
        with np.errstate(divide="ignore", invalid="ignore"):
            energy_ratio = energy / energy[0]
        fig2.add_trace(
            go.Scatter(
                x=t,
                y=energy_ratio,
                mode="lines",
                name=name,
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"{name}<br>Time: %{{x:.2f}}s<br>E/E0: %{{y:.4f}}<extra></extra>",
            )
        )

    fig2.update_layout(
        title="Energy Relative to Initial Energy",
        xaxis_title="Time (s)",
        yaxis_title="E / E0",
        hovermode="closest",
        height=400,
        template="plotly_white",
    )

    # 3. Phase plot (position vs velocity)
    fig3 = go.Figure()
    for i, name in enumerate(names):
        fig3.add_trace(
            go.Scatter(
                x=results[name]["state"][:, 0],
                y=results[name]["state"][:, 1],
                mode="lines",
                name=name,
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"{name}<br>Position: %{{x:.3f}}<br>Velocity: %{{y:.3f}}<extra></extra>",
            )
        )

    fig3.update_layout(
        title="Phase Plot: Position vs Velocity",
        xaxis_title="Position",
        yaxis_title="Velocity",
        hovermode="closest",
        height=400,
        template="plotly_white",
    )

    # 4. Error bar chart
    fig4 = go.Figure()
    rel_errors = [results[n]["analysis"]["max_relative_error"] * 100 for n in names]
    colors_bar = ["red" if results[n]["analysis"]["diverged"] else "green" for n in names]
    fig4.add_trace(
        go.Bar(
            x=names,
            y=rel_errors,
            marker_color=colors_bar,
            text=[f"{e:.3g}%" for e in rel_errors],
            textposition="outside",
            hovertemplate="Integrator: %{x}<br>Max error: %{y:.3g}%<extra></extra>",
        )
    )

    fig4.update_layout(
        title=f"Maximum Error vs {reference_label.capitalize()} Solution",
        xaxis_title="Integrator",
        yaxis_title="Max Error (% of peak amplitude)",
        yaxis_type="log",
        height=400,
        template="plotly_white",
    )

    # Summary table
    table_rows = [
        html.Tr([
            html.Th("Integrator"),
            html.Th("Diverged"),
            html.Th("Max Error (%)"),
            html.Th("Max Amplitude"),
            html.Th("Energy Ratio"),
            html.Th("Growing Oscillations"),
        ])
    ]

    for name in names:
        analysis = results[name]["analysis"]
        table_rows.append(
            html.Tr([
                html.Td(name),
                html.Td(
                    "Yes" if analysis["diverged"] else "No",
                    style={"color": "red" if analysis["diverged"] else "green", "fontWeight": "bold"},
                ),
                html.Td(f"{analysis['max_relative_error']*100:.4g}"),
                html.Td(f"{analysis['max_amplitude']:.4g}"),
                html.Td(f"{analysis['energy_ratio']:.4g}"),
                html.Td("Yes" if analysis["is_growing"] else "No"),
            ])
        )

    return html.Div([
        html.H2("Simulation Results", style={"marginTop": "30px", "marginBottom": "20px"}),
        html.Div([
            html.H3("Summary Table", style={"marginBottom": "15px"}),
            html.Table(
                table_rows,
                style={
                    "width": "100%",
                    "borderCollapse": "collapse",
                    "marginBottom": "30px",
                    "fontSize": "14px",
                },
            ),
        ], style={"marginBottom": "30px"}),
        html.Div([
            html.Div([dcc.Graph(figure=fig1)], style={"marginBottom": "30px"}),
            html.Div([dcc.Graph(figure=fig2)], style={"marginBottom": "30px"}),
            html.Div([
                html.Div(
                    [dcc.Graph(figure=fig3)],
                    style={"width": "48%", "display": "inline-block", "marginRight": "2%"},
                ),
                html.Div(
                    [dcc.Graph(figure=fig4)],
                    style={"width": "48%", "display": "inline-block"},
                ),
            ], style={"marginBottom": "30px"}),
        ]),
    ])


if __name__ == "__main__":
    app.run(debug=True, port=8050)
