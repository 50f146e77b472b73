"""
SimpleMed Radiology: Streamlit UI entry point.

Reads everything through ScanStore; the store is the only thing the page talks to.
"""

import streamlit as st

# Load .env first so configured URL/paths are used by the data layer
from simplemed.utils.config import load_config
load_config()

from simplemed.domains.display import parse_hex_color, radiation_color, to_css_hex
from simplemed.domains.share import format_scan_summary
from simplemed.services.scan_store import ScanStore
from simplemed.utils.logger import setup_logger, get_logger

setup_logger()
log = get_logger()

st.set_page_config(page_title="SimpleMed Radiology", layout="centered")
st.title("SimpleMed Radiology")

# One store per browser session so favourites stay local to the user
if "store" not in st.session_state:
    store = ScanStore()
    store.load_data()
    st.session_state.store = store

store: ScanStore = st.session_state.store


def _category_badge(name: str, color_hex: str) -> str:
    color = to_css_hex(parse_hex_color(color_hex))
    return f"<span style='color:{color};font-weight:600'>{name}</span>"


def _render_scan(scan, category_name: str, category_color: str, key_prefix: str) -> None:
    with st.expander(scan.title):
        if scan.media.has_icon:
            icon_col, badge_col = st.columns([1, 6])
            icon_col.image(scan.media.icon_url, width=48)
            badge_col.markdown(_category_badge(category_name, category_color), unsafe_allow_html=True)
        else:
            st.markdown(_category_badge(category_name, category_color), unsafe_allow_html=True)
        if scan.media.has_hero_image:
            st.image(scan.media.hero_image_url, use_container_width=True)
        if scan.short_summary:
            st.markdown(f"_{scan.short_summary}_")
        if scan.full_description:
            st.write(scan.full_description)

        prep = scan.preparation
        st.markdown("**Preparation**")
        fasting = f"{prep.fasting_hours} hours" if prep.requires_fasting else "Not required"
        st.write(f"Fasting: {fasting} · Bladder: {prep.bladder}")
        st.write(prep.instructions)

        logistics = scan.logistics
        st.markdown("**What to expect**")
        st.write(
            f"Duration: {logistics.duration_minutes} min · Noise: {logistics.noise_level} · "
            f"Claustrophobia risk: {logistics.claustrophobia_risk}"
        )

        safety = scan.safety
        level_color = to_css_hex(radiation_color(safety.radiation_level))
        st.markdown(
            f"**Radiation level:** <span style='color:{level_color}'>{safety.radiation_level}</span>",
            unsafe_allow_html=True,
        )
        if safety.radiation_note:
            st.caption(safety.radiation_note)
        st.write(
            f"Contrast risk: {'Caution' if safety.contrast_risk else 'Safe'} · "
            f"Pregnancy: {'Safe' if safety.pregnancy_safe else 'Caution'}"
        )

        col1, col2 = st.columns([1, 1])
        with col1:
            label = "★ Remove favourite" if store.is_favourite(scan.id) else "☆ Add favourite"
            if st.button(label, key=f"{key_prefix}_fav_{scan.id}", use_container_width=True):
                store.toggle_favourite(scan.id)
                st.rerun()
        with col2:
            with st.popover("Share", use_container_width=True):
                st.code(format_scan_summary(scan, category_name), language="text")


with st.sidebar:
    st.header("Data")
    doc = store.document
    if doc is not None:
        st.caption(f"Version {doc.version}")
        if doc.contact_email:
            st.caption(f"Contact: {doc.contact_email}")
    if st.button("Refresh", use_container_width=True):
        log.info("Refresh requested from UI")
        with st.spinner("Loading…"):
            store.refresh_data()
        st.rerun()

    st.subheader("Favourites")
    favourites = store.favourite_scans
    if not favourites:
        st.caption("No favourites yet.")
    for fav in favourites:
        st.write(f"★ {fav.scan.title}")

if store.has_error:
    st.error(store.error_message)

query = st.text_input("Search scans", placeholder="e.g. CT, MRI, ultrasound")

if query:
    results = store.search_scans(query)
    if not results:
        st.info(f"No scans match “{query}”.")
    for r in results:
        _render_scan(r.scan, r.category_name, r.category_color, key_prefix="search")
elif not store.has_data:
    st.info("No scan information available.")
else:
    for section in store.document.sections:
        st.subheader(section.category_name)
        for scan in section.scans:
            _render_scan(scan, section.category_name, section.color_hex, key_prefix="list")
