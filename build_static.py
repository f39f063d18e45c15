#!/usr/bin/env python3
"""
Build a standalone static HTML file from the site's content tables.
Run: python build_static.py [output.html]
Output: portfolio.html (standalone file with embedded CSS)
"""

import sys
from pathlib import Path

from portfolio_site.content_schema import (
    ContentValidationError,
    find_duplicates,
    missing_assets,
    validate_nav_links,
    validate_projects,
)
from portfolio_site.site_config import DEFAULT_OUTPUT, SITE_TITLE, STATIC_ROOT, STYLESHEET, STYLESHEET_LINK


def _warn(msg: str):
    print(f"Warning: {msg}", file=sys.stderr)


def check_content(links, projects, static_root=STATIC_ROOT):
    """Validate both tables and print warnings for duplicates and missing images."""
    validate_nav_links(links)
    validate_projects(projects)

    for field in ("href", "title"):
        for i, value in find_duplicates(links, field):
            _warn(f"HEADER_NAV_LINKS[{i}].{field} repeats {value!r}")
    for field in ("href", "title"):
        for i, value in find_duplicates(projects, field):
            _warn(f"PROJECTS[{i}].{field} repeats {value!r}")
    for i, img_src in missing_assets(projects, static_root):
        _warn(f"PROJECTS[{i}].img_src {img_src!r} not found under {static_root}, using placeholder")


def build_static_html(output_path: str = DEFAULT_OUTPUT) -> Path:
    """Generate a standalone HTML file with embedded CSS."""

    # Importing the tables runs their own validation
    print("Loading content...")
    try:
        from portfolio_site.header_nav_links import HEADER_NAV_LINKS
        from portfolio_site.projects_data import PROJECTS
        check_content(HEADER_NAV_LINKS, PROJECTS)
    except ContentValidationError as e:
        print(f"Error validating content: {e}", file=sys.stderr)
        sys.exit(1)

    print("Reading CSS...")
    css_path = Path(STYLESHEET)
    if not css_path.exists():
        print(f"Error: CSS file not found at {css_path}", file=sys.stderr)
        sys.exit(1)

    with open(css_path, "r", encoding="utf-8") as f:
        css_content = f.read()

    print("Rendering HTML...")
    from portfolio_site.render import render_page

    html_content = render_page(HEADER_NAV_LINKS, PROJECTS, title=SITE_TITLE)

    # Replace the CSS link with embedded CSS
    html_content = html_content.replace(
        STYLESHEET_LINK,
        f'<style>\n{css_content}\n</style>'
    )

    out = Path(output_path)
    print(f"Writing to {out}...")
    with open(out, "w", encoding="utf-8") as f:
        f.write(html_content)

    print(f"✓ Successfully generated {out}")
    print(f"  {len(HEADER_NAV_LINKS)} nav links, {len(PROJECTS)} projects")
    return out


if __name__ == "__main__":
    output_file = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_OUTPUT
    build_static_html(output_file)
