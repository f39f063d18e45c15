# content_report.py
# Tabular views of the content tables (preview app + build summary).

import pandas as pd

from portfolio_site.content_schema import asset_path, is_internal_href, normalize_description
from portfolio_site.site_config import STATIC_ROOT

NAV_COLS = ["position", "title", "href", "internal"]
PROJECT_COLS = [
    "position", "title", "description", "href", "img_src",
    "has_link", "has_image", "image_found",
]


def nav_links_frame(links) -> pd.DataFrame:
    rows = [
        {
            "position": i + 1,
            "title": link.title,
            "href": link.href,
            "internal": is_internal_href(link.href),
        }
        for i, link in enumerate(links)
    ]
    return pd.DataFrame(rows, columns=NAV_COLS)


def projects_frame(projects, static_root=STATIC_ROOT) -> pd.DataFrame:
    rows = []
    for i, p in enumerate(projects):
        rows.append({
            "position": i + 1,
            "title": p.title,
            "description": normalize_description(p.description),
            "href": p.href or "",
            "img_src": p.img_src or "",
            "has_link": p.href is not None,
            "has_image": p.img_src is not None,
            "image_found": bool(p.img_src) and asset_path(p.img_src, static_root).is_file(),
        })
    return pd.DataFrame(rows, columns=PROJECT_COLS)
