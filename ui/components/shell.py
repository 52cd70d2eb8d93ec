"""Tabbed app shell: top bar with back button, bottom tab row, action buttons."""
from typing import Iterable, Optional

import streamlit as st

from domain.models import CurrentUser, ScreenContext
from services.navigation import NavigationController
from services.roles import visible_nav_items


def render_top_bar(ctx: ScreenContext):
    if not ctx.title:
        return
    cols = st.columns([1, 11])
    if ctx.on_back is not None:
        cols[0].button("←", key=f"back_{ctx.screen.value}", on_click=ctx.on_back,
                       help="Go back to previous screen")
    cols[1].markdown(f"<div class='top-bar'>{ctx.title}</div>", unsafe_allow_html=True)


def render_tab_bar(controller: NavigationController, user: Optional[CurrentUser]):
    items = visible_nav_items(user)
    active = controller.shell_tab()
    st.divider()
    cols = st.columns(len(items))
    for col, item in zip(cols, items):
        col.button(
            f"{item.icon} {item.label}",
            key=f"tab_{item.value.value}",
            on_click=controller.change_tab,
            args=(item.value,),
            type="primary" if item.value == active else "secondary",
            use_container_width=True,
        )


def action_buttons(ctx: ScreenContext, names: Optional[Iterable[str]] = None, columns: int = 2, **params):
    """One button per visible action; captain/admin-only ones are hidden for other users."""
    visible = [n for n in ctx.visible_actions() if names is None or n in names]
    if not visible:
        return
    cols = st.columns(min(columns, len(visible)))
    for i, name in enumerate(visible):
        cols[i % len(cols)].button(
            ctx.labels.get(name, name),
            key=f"act_{ctx.screen.value}_{name}",
            on_click=ctx.action(name),
            kwargs=params or None,
            use_container_width=True,
        )
