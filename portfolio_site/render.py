"""
Jinja2 rendering for the header menu and the projects gallery.

Templates live in ``templates/``:
- ``_header.html``   site title + one <a> per navigation link
- ``_projects.html`` one card per project
- ``index.html``     the full page (includes both)
"""

from jinja2 import Environment, FileSystemLoader, select_autoescape

from portfolio_site.content_schema import asset_path, is_internal_href, normalize_description
from portfolio_site.header_nav_links import HEADER_NAV_LINKS
from portfolio_site.projects_data import PROJECTS
from portfolio_site.site_config import PLACEHOLDER_IMAGE, SITE_TITLE, STATIC_ROOT, TEMPLATES_DIR

_env = None


def get_environment() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
        )
    return _env


def _link_context(links):
    return [
        {"href": link.href, "title": link.title, "internal": is_internal_href(link.href)}
        for link in links
    ]


def _card_context(projects, static_root):
    cards = []
    for p in projects:
        # Missing file on disk falls back to the placeholder too
        has_image = bool(p.img_src) and (
            static_root is None or asset_path(p.img_src, static_root).is_file()
        )
        cards.append({
            "title": p.title,
            "description": normalize_description(p.description),
            "href": p.href,
            "internal": bool(p.href) and is_internal_href(p.href),
            "image": p.img_src if has_image else PLACEHOLDER_IMAGE,
            "placeholder": not has_image,
        })
    return cards


def render_header(links=HEADER_NAV_LINKS, title: str = SITE_TITLE) -> str:
    template = get_environment().get_template("_header.html")
    return template.render(title=title, links=_link_context(links))


def render_projects(projects=PROJECTS, static_root=STATIC_ROOT) -> str:
    """Render the gallery.

    Pass ``static_root=None`` to trust every ``img_src`` without touching the disk.
    """
    template = get_environment().get_template("_projects.html")
    return template.render(cards=_card_context(projects, static_root))


def render_page(links=HEADER_NAV_LINKS, projects=PROJECTS, title: str = SITE_TITLE,
                static_root=STATIC_ROOT) -> str:
    template = get_environment().get_template("index.html")
    return template.render(
        title=title,
        links=_link_context(links),
        cards=_card_context(projects, static_root),
    )
