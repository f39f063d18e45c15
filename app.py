import streamlit as st
import pandas as pd

from portfolio_site.content_report import nav_links_frame, projects_frame
from portfolio_site.content_schema import asset_path, find_duplicates, missing_assets, normalize_description
from portfolio_site.header_nav_links import HEADER_NAV_LINKS
from portfolio_site.projects_data import PROJECTS
from portfolio_site.render import render_page
from portfolio_site.site_config import PLACEHOLDER_IMAGE, SITE_TITLE, STATIC_ROOT

# ============================================================
# Content preview for the portfolio site
# Goals:
# 1) See the menu + project cards the way visitors will, before deploying
# 2) Surface content problems (duplicates, missing images) without failing
# 3) Download the rendered static page
#
# The tables validate themselves on import, so if this page loads at all
# every record already matches its schema.
# ============================================================

st.set_page_config(page_title=f"{SITE_TITLE} · Preview", layout="wide", page_icon="🗂️")

COLS_PER_ROW = 3


# -----------------------------
# Helpers
# -----------------------------
def _menu_markdown(links) -> str:
    return " · ".join(f"[{link.title}]({link.href})" for link in links)


def _card_image(img_src):
    if img_src:
        path = asset_path(img_src, STATIC_ROOT)
        if path.is_file():
            return str(path)
    return str(asset_path(PLACEHOLDER_IMAGE, STATIC_ROOT))


@st.cache_data(ttl=300)
def load_reports():
    return nav_links_frame(HEADER_NAV_LINKS), projects_frame(PROJECTS, STATIC_ROOT)


def _duplicates_frame() -> pd.DataFrame:
    rows = []
    for table, records in (("HEADER_NAV_LINKS", HEADER_NAV_LINKS), ("PROJECTS", PROJECTS)):
        for field in ("href", "title"):
            for i, value in find_duplicates(records, field):
                rows.append({"table": table, "index": i, "field": field, "value": value})
    return pd.DataFrame(rows, columns=["table", "index", "field", "value"])


# ------------------------------------------------------------
# Header
# ------------------------------------------------------------
st.title(SITE_TITLE)
st.markdown(_menu_markdown(HEADER_NAV_LINKS))

tab_gallery, tab_checks = st.tabs(["🖼️ Gallery", "🧪 Content checks"])

# ------------------------------------------------------------
# Gallery
# ------------------------------------------------------------
with tab_gallery:
    for start in range(0, len(PROJECTS), COLS_PER_ROW):
        cols = st.columns(COLS_PER_ROW)
        for col, project in zip(cols, PROJECTS[start:start + COLS_PER_ROW]):
            with col:
                st.image(_card_image(project.img_src), use_container_width=True)
                st.subheader(project.title)
                st.write(normalize_description(project.description))
                if project.href:
                    st.link_button("Learn more →", project.href)

# ------------------------------------------------------------
# Content checks
# ------------------------------------------------------------
with tab_checks:
    nav_df, projects_df = load_reports()

    st.subheader("Navigation links")
    st.dataframe(nav_df, use_container_width=True, hide_index=True)

    st.subheader("Projects")
    st.dataframe(
        projects_df,
        column_config={
            "has_link": st.column_config.CheckboxColumn("Link?"),
            "has_image": st.column_config.CheckboxColumn("Image?"),
            "image_found": st.column_config.CheckboxColumn("Image on disk?"),
        },
        use_container_width=True,
        hide_index=True,
    )

    dupes = _duplicates_frame()
    if not dupes.empty:
        st.warning("Some links or titles repeat. The site still builds, but visitors will see duplicates.")
        st.dataframe(dupes, use_container_width=True, hide_index=True)

    missing = missing_assets(PROJECTS, STATIC_ROOT)
    if missing:
        st.info("These images are not under static/ yet, so their cards show the placeholder.")
        st.dataframe(pd.DataFrame(missing, columns=["index", "img_src"]), use_container_width=True, hide_index=True)

    st.download_button(
        label="⬇️ Download rendered page",
        data=render_page().encode("utf-8"),
        file_name="index.html",
        mime="text/html",
    )

st.divider()
st.caption("Edit portfolio_site/header_nav_links.py / projects_data.py and redeploy to change the site.")
