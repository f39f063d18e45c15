# header_nav_links.py
# Data only. Menu order = tuple order.

from portfolio_site.content_schema import NavigationLink, validate_nav_links

HEADER_NAV_LINKS = (
    NavigationLink(href="/", title="Home"),
    NavigationLink(href="/blog", title="Blog"),
    NavigationLink(href="/tags", title="Tags"),
    NavigationLink(href="/projects", title="Projects"),
    NavigationLink(href="/about", title="About"),
    NavigationLink(
        href="https://drive.google.com/file/d/1rM7iMvRxWB018cSueHHTGxnGNr7gPV2X/view",
        title="Resume",
    ),
)

validate_nav_links(HEADER_NAV_LINKS)
