"""passcraft -- Streamlit web interface."""

from dataclasses import replace

import streamlit as st

from passcraft import (
    GraphicalOptions,
    PasswordOptions,
    empty_grid,
    generate_password,
    icon_palette,
    score_strength,
    toggle_cell,
    toggle_icon,
)
from passcraft.clipboard import COPY_FAILED, COPY_OK, copy_to_clipboard
from passcraft.config import load_settings
from passcraft.log import configure_logging
from passcraft.options import ICON_THEMES, MAX_ICONS, MAX_LENGTH, MIN_LENGTH, MODES

configure_logging()
settings = load_settings()
configure_logging(settings.log_level, json_output=settings.log_json)

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="wide",
)

# ── Session state ─────────────────────────────────────────────────────────

st.session_state.setdefault("options", PasswordOptions(settings.default_length))
st.session_state.setdefault("graphical", GraphicalOptions())
st.session_state.setdefault("password", "")
st.session_state.setdefault("generated_for", None)
st.session_state.setdefault("force_regenerate", True)


def _on_text_options() -> None:
    # Widget state is dropped while graphical mode hides these widgets, so the
    # record in session state is the source of truth.
    st.session_state.options = PasswordOptions(
        st.session_state.length_input,
        uppercase=st.session_state.upper_input,
        digits=st.session_state.digits_input,
        symbols=st.session_state.symbols_input,
        emojis=st.session_state.emojis_input,
        memorable=st.session_state.style_input == "Memorable",
    )


def _on_toggle_icon(icon: str) -> None:
    g = st.session_state.graphical
    st.session_state.graphical = replace(g, icons=toggle_icon(g.icons, icon))


def _on_toggle_cell(row: int, col: int) -> None:
    g = st.session_state.graphical
    st.session_state.graphical = replace(g, grid=toggle_cell(g.grid, row, col))


def _on_clear_pattern() -> None:
    g = st.session_state.graphical
    st.session_state.graphical = replace(g, grid=empty_grid(len(g.grid)))


def _on_regenerate() -> None:
    st.session_state.force_regenerate = True


def _on_copy() -> None:
    # Runs on the machine serving the page; the code block below also has a
    # browser-side copy button.
    if copy_to_clipboard(st.session_state.password):
        st.toast(COPY_OK, icon="✅")
    else:
        st.toast(COPY_FAILED, icon="⚠️")


# ── Header ────────────────────────────────────────────────────────────────

st.title("Password Generator")
st.caption(
    "Generate strong, unique passwords with advanced graphical options.  \n"
    "The strength score is a rough heuristic, not a security guarantee."
)

mode = st.radio(
    "Mode", MODES, horizontal=True, format_func=str.capitalize,
    key="mode", label_visibility="collapsed",
)
show_text = mode in ("text", "hybrid")
show_graphical = mode in ("graphical", "hybrid")

col_main, col_graphical = st.columns(2)

# ── Main card ─────────────────────────────────────────────────────────────

with col_main:
    password_slot = st.empty()

    btn_copy, btn_regen = st.columns(2)
    with btn_copy:
        st.button("\U0001f4cb Copy", on_click=_on_copy)
    with btn_regen:
        st.button("\U0001f504 Regenerate", on_click=_on_regenerate, type="primary")

    if show_text:
        opts = st.session_state.options
        st.radio(
            "Style", ["Random", "Memorable"], horizontal=True,
            index=1 if opts.memorable else 0,
            key="style_input", on_change=_on_text_options,
        )
        st.slider(
            "Character Length", MIN_LENGTH, MAX_LENGTH, opts.length,
            key="length_input", on_change=_on_text_options,
        )
        st.checkbox("Aa  Capital letters", value=opts.uppercase,
                    key="upper_input", on_change=_on_text_options)
        st.checkbox("123  Numbers", value=opts.digits,
                    key="digits_input", on_change=_on_text_options)
        st.checkbox("!@#  Symbols", value=opts.symbols,
                    key="symbols_input", on_change=_on_text_options)
        st.checkbox("\U0001f600  Emojis", value=opts.emojis,
                    key="emojis_input", on_change=_on_text_options)

    strength_slot = st.container()

# ── Graphical card ────────────────────────────────────────────────────────

if show_graphical:
    with col_graphical:
        st.subheader("Graphical Elements")

        theme = st.selectbox(
            "Icon Theme", list(ICON_THEMES), format_func=str.capitalize,
            key="theme",
        )
        graphical = st.session_state.graphical
        if graphical.theme != theme:
            graphical = replace(graphical, theme=theme)
            st.session_state.graphical = graphical

        st.markdown(
            f"**Select Icons** &nbsp; "
            f"<small>{len(graphical.icons)}/{MAX_ICONS} selected</small>",
            unsafe_allow_html=True,
        )
        palette = icon_palette(graphical.theme)
        for start in range(0, len(palette), 8):
            for col, icon in zip(st.columns(8), palette[start:start + 8]):
                with col:
                    st.button(
                        icon,
                        key=f"icon-{graphical.theme}-{start}-{icon}",
                        type="primary" if icon in graphical.icons else "secondary",
                        on_click=_on_toggle_icon,
                        args=(icon,),
                    )

        if graphical.icons:
            st.markdown("**Selected Icons** &nbsp; <small>click to remove</small>",
                        unsafe_allow_html=True)
            for col, icon in zip(st.columns(MAX_ICONS), graphical.icons):
                with col:
                    st.button(
                        icon, key=f"chip-{icon}",
                        on_click=_on_toggle_icon, args=(icon,),
                    )

        st.markdown("**Pattern Grid**")
        size = len(graphical.grid)
        for row in range(size):
            for col_idx, col in enumerate(st.columns(size)):
                with col:
                    cell = graphical.grid[row][col_idx]
                    st.button(
                        "●" if cell else "○",
                        key=f"cell-{row}-{col_idx}",
                        type="primary" if cell else "secondary",
                        on_click=_on_toggle_cell,
                        args=(row, col_idx),
                        help=f"Pattern cell {row + 1}-{col_idx + 1}",
                    )
        st.button("Clear Pattern", on_click=_on_clear_pattern)

# ── Generate + score ──────────────────────────────────────────────────────

options = st.session_state.options
graphical = replace(st.session_state.graphical, mode=mode)

if st.session_state.force_regenerate or st.session_state.generated_for != (options, graphical):
    st.session_state.password = generate_password(options, graphical)
    st.session_state.generated_for = (options, graphical)
    st.session_state.force_regenerate = False

password = st.session_state.password
report = score_strength(password, graphical)

with password_slot:
    st.code(password or " ", language=None)

with strength_slot:
    st.markdown(
        f"**Security Strength:** "
        f"<span style='color:{report['color']}'>{report['label']}</span>"
        f" &nbsp;·&nbsp; {report['entropy']} bits",
        unsafe_allow_html=True,
    )
    st.progress(int(report["score"]))
    st.caption(report["hint"])
