"""Zodiac Wheel: Streamlit app for planetary positions on a zodiac wheel."""

import datetime
import time

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from zodiacwheel.chart import ChartContext, midnight  # noqa: E402
from zodiacwheel.i18n import t  # noqa: E402
from zodiacwheel.oracle import FallbackOracle, default_oracle  # noqa: E402
from zodiacwheel.renderers.plotly_wheel import render_plotly_wheel  # noqa: E402
from zodiacwheel.renderers.svg_wheel import render_info_card  # noqa: E402
from zodiacwheel.settings import load_settings  # noqa: E402

_FRAME_SECONDS = 1 / 60

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")
_settings = load_settings()

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="♈",
    layout="centered",
)


@st.cache_resource
def _oracle() -> FallbackOracle:
    return default_oracle(_settings.ephemeris_dir, _settings.kernel)


# --- Session state initialization ---

if "context" not in st.session_state:
    st.session_state.context = ChartContext(
        use_true=True,
        transition_ms=_settings.transition_ms,
        boundary_epsilon=_settings.boundary_epsilon,
    )
if "instant" not in st.session_state:
    st.session_state.instant = midnight(datetime.date.today(), _settings.timezone)

_context: ChartContext = st.session_state.context


def _on_date_change() -> None:
    st.session_state.instant = midnight(st.session_state.date_pick, _settings.timezone)


def _on_now() -> None:
    st.session_state.instant = datetime.datetime.now(datetime.timezone.utc)


def _on_toggle() -> None:
    # Toggle on = traditional; the animation always restarts from the active table
    _context.toggle(use_true=not st.session_state.traditional)


st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #000d14 !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .planet-info {
        display: inline-block;
        margin: 0.2rem;
        padding: 8px;
        border-radius: 8px;
        min-width: 120px;
        color: #e8e8e8;
    }
    .planet-info small { display: block; opacity: 0.7; }
    label, [data-testid="stWidgetLabel"] p {
        color: #aaaaaa !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Input panel ---
col1, col2, col3 = st.columns([3, 1, 3])
with col1:
    st.date_input(
        t("label_date", _lang),
        value=st.session_state.instant.date(),
        min_value=datetime.date(1900, 1, 1),
        max_value=datetime.date(2050, 12, 31),
        key="date_pick",
        on_change=_on_date_change,
    )
with col2:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    st.button(t("btn_now", _lang), key="now_btn", on_click=_on_now)
with col3:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    st.toggle(
        t("toggle_traditional", _lang),
        value=not _context.use_true,
        key="traditional",
        on_change=_on_toggle,
    )

# --- Chart area ---
chart_placeholder = st.empty()
cards_placeholder = st.empty()


def _draw(step: int = 0) -> None:
    frame = _context.compute(st.session_state.instant, _oracle())
    # Element ids must be unique within one script run
    chart_placeholder.plotly_chart(
        render_plotly_wheel(frame), use_container_width=False, key=f"wheel-{step}"
    )
    cards_placeholder.markdown(
        "".join(render_info_card(p, _lang) for p in frame.placements),
        unsafe_allow_html=True,
    )


_draw()

# The script run is the animation driver: one tick per repaint until done
_step = 0
while _context.is_animating:
    time.sleep(_FRAME_SECONDS)
    tick = _context.advance()
    if tick is None:
        break
    _step += 1
    _draw(_step)

convention = "convention_true" if _context.use_true else "convention_traditional"
st.caption(t(convention, _lang))
if _context.degraded_count:
    st.caption(t("degraded_notice", _lang).format(count=_context.degraded_count))
