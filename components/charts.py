"""
Analytics chart components for the dashboard.
Each builder takes a breakdown list ({"name", "count"[, "value"]}) and returns a plotly Figure.
"""

import plotly.graph_objects as go

from config.constants import STATUS_COLORS

PALETTE = ['#3B82F6', '#10B981', '#F59E0B', '#EF4444', '#8B5CF6', '#06B6D4', '#EC4899', '#84CC16']

BASE_FONT = dict(family='Inter, -apple-system, sans-serif', size=12, color='#374151')

HOVER_LABEL = dict(
    bgcolor='#1F2937',
    bordercolor='#374151',
    font=dict(family='Inter, -apple-system, sans-serif', size=13, color='#FFFFFF'),
    align='left'
)


def create_analytics_bar_chart(
    x_data: list,
    y_data: list,
    x_label: str,
    y_label: str,
    height: int = 320,
    hover_context: str = "Assets",
    total_for_percent: int = None,
) -> go.Figure:
    """
    Vertical bar chart with category axis and share-of-total tooltips.

    Args:
        x_data: Category names
        y_data: Counts per category
        x_label: Label for x-axis
        y_label: Label for y-axis
        height: Chart height in pixels
        hover_context: Label for the value in the tooltip
        total_for_percent: Total used for the "Share" line; omitted when falsy
    """
    if total_for_percent:
        hover_template = (
            '<b>%{x}</b><br>'
            f'{hover_context}: <b>%{{y:,}}</b><br>'
            'Share: <b>%{customdata:.1f}%</b>'
            '<extra></extra>'
        )
        customdata = [v / total_for_percent * 100 for v in y_data]
    else:
        hover_template = f'<b>%{{x}}</b><br>{hover_context}: <b>%{{y:,}}</b><extra></extra>'
        customdata = None

    fig = go.Figure(data=[go.Bar(
        x=x_data,
        y=y_data,
        marker=dict(color=[PALETTE[i % len(PALETTE)] for i in range(len(x_data))], line=dict(width=0)),
        hovertemplate=hover_template,
        customdata=customdata,
        hoverlabel=HOVER_LABEL,
    )])

    fig.update_layout(
        height=height,
        paper_bgcolor='#FFFFFF',
        plot_bgcolor='#FFFFFF',
        font=BASE_FONT,
        margin=dict(t=20, b=60, l=50, r=20),
        showlegend=False,
        xaxis=dict(
            title=dict(text=x_label, font=dict(size=12, color='#4B5563'), standoff=12),
            tickfont=dict(size=11, color='#6B7280'),
            showgrid=False,
            showline=True,
            linecolor='#E5E7EB',
            type='category',
            tickangle=0 if len(x_data) <= 6 else -45
        ),
        yaxis=dict(
            title=dict(text=y_label, font=dict(size=12, color='#4B5563'), standoff=12),
            tickfont=dict(size=11, color='#9CA3AF'),
            showgrid=True,
            gridcolor='#F3F4F6',
            rangemode='tozero',
            zerolinecolor='#E5E7EB',
        ),
        bargap=0.3,
        hovermode='closest',
    )
    return fig


def create_status_donut_chart(rows: list, height: int = 320) -> go.Figure:
    """Asset count per status, colored with STATUS_COLORS."""
    labels = [r["name"] for r in rows]
    values = [r["count"] for r in rows]
    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=0.55,
        marker=dict(colors=[STATUS_COLORS.get(label, '#94A3B8') for label in labels]),
        hovertemplate='<b>%{label}</b><br>Assets: %{value}<br>%{percent}<extra></extra>',
        hoverlabel=HOVER_LABEL,
        sort=False,
    )])
    fig.update_layout(
        height=height,
        font=BASE_FONT,
        margin=dict(t=20, b=20, l=20, r=20),
        legend=dict(orientation='h', y=-0.1),
        annotations=[dict(text=f"<b>{sum(values)}</b><br>assets", showarrow=False, font=dict(size=14))],
    )
    return fig


def create_value_bar_chart(rows: list, height: int = 320) -> go.Figure:
    """Horizontal bars of summed current value per category."""
    rows = sorted(rows, key=lambda r: r.get("value", 0))
    fig = go.Figure(data=[go.Bar(
        x=[r.get("value", 0) for r in rows],
        y=[r["name"] for r in rows],
        orientation='h',
        marker=dict(color='#3B82F6'),
        hovertemplate='<b>%{y}</b><br>Current value: ₹%{x:,.0f}<extra></extra>',
        hoverlabel=HOVER_LABEL,
    )])
    fig.update_layout(
        height=height,
        paper_bgcolor='#FFFFFF',
        plot_bgcolor='#FFFFFF',
        font=BASE_FONT,
        margin=dict(t=20, b=40, l=10, r=20),
        xaxis=dict(showgrid=True, gridcolor='#F3F4F6', tickprefix='₹'),
        yaxis=dict(showgrid=False),
    )
    return fig
