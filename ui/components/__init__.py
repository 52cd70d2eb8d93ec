"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: Basic, general-purpose components like CSS injectors, status badges and toasts.
- `cards`: Match/team cards and API-backed tables.
- `shell`: The tabbed app shell (top bar, tab bar) and action buttons.
- `profile_form`: The onboarding profile form.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    status_badge,
    notify,
)

from .cards import (
    match_card,
    team_card,
    records_table,
)

from .shell import (
    render_top_bar,
    render_tab_bar,
    action_buttons,
)

from . import profile_form
