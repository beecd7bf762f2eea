"""
Pages package for the IT Asset Tracker.
Each module exposes a render(ctx: AppContext) function.
"""

from views.dashboard import render as render_dashboard
from views.assets import render as render_assets
from views.employees import render as render_employees
from views.settings import render as render_settings

# Map page display names to their render functions
PAGE_REGISTRY = {
    "Dashboard": render_dashboard,
    "Assets": render_assets,
    "Employees": render_employees,
    "Settings": render_settings,
}
