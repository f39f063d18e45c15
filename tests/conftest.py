import pytest
from bs4 import BeautifulSoup

from portfolio_site.content_schema import Project


@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s


@pytest.fixture
def optionality_projects():
    # every href / img_src combination, in this order
    return [
        Project(title="Both", description="Has link and image.", href="/blog/both", img_src="/static/images/both.png"),
        Project(title="Link only", description="Has a link.", href="https://github.com/example/link-only"),
        Project(title="Image only", description="Has an image.", img_src="/static/images/image-only.png"),
        Project(title="Neither", description="Informational."),
    ]
