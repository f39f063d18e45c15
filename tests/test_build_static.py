import pytest

import build_static
from portfolio_site.content_schema import ContentValidationError, NavigationLink, Project
from portfolio_site.site_config import STYLESHEET_LINK


def test_build_writes_standalone_page(tmp_path, soup):
    out = build_static.build_static_html(str(tmp_path / "portfolio.html"))

    html = out.read_text(encoding="utf-8")
    assert STYLESHEET_LINK not in html
    s = soup(html)
    assert s.find("style") is not None
    assert ".site-nav" in s.find("style").get_text()
    assert s.select_one("nav a[href='/blog']").get_text() == "Blog"


def test_build_exits_on_invalid_content(tmp_path, monkeypatch, capsys):
    def boom(links, projects, static_root=None):
        raise ContentValidationError(["PROJECTS[0].title: must be a non-empty string"])

    monkeypatch.setattr(build_static, "check_content", boom)

    with pytest.raises(SystemExit) as exc:
        build_static.build_static_html(str(tmp_path / "out.html"))

    assert exc.value.code == 1
    assert "PROJECTS[0].title" in capsys.readouterr().err
    assert not (tmp_path / "out.html").exists()


def test_check_content_warns_about_duplicates_and_missing_images(tmp_path, capsys):
    links = [NavigationLink("/", "Home"), NavigationLink("/", "Start")]
    projects = [Project(title="A", description="d", img_src="/static/images/nope.png")]

    build_static.check_content(links, projects, static_root=tmp_path)

    err = capsys.readouterr().err
    assert "HEADER_NAV_LINKS[1].href repeats '/'" in err
    assert "PROJECTS[0].img_src '/static/images/nope.png' not found" in err


def test_check_content_rejects_malformed_records(tmp_path):
    with pytest.raises(ContentValidationError):
        build_static.check_content([NavigationLink("", "Home")], [], static_root=tmp_path)
