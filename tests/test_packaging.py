import tomllib
from pathlib import Path, PurePosixPath

import portfolio_site
from portfolio_site import site_config
from portfolio_site.render import render_page

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(portfolio_site.__file__).resolve().parent


def _setuptools_config():
    with open(REPO_ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)["tool"]["setuptools"]


def test_templates_and_static_live_inside_the_package():
    assert site_config.TEMPLATES_DIR.parent == PACKAGE_DIR
    assert site_config.STATIC_ROOT.parent == PACKAGE_DIR
    assert (site_config.TEMPLATES_DIR / "index.html").is_file()
    assert site_config.STYLESHEET.is_file()


def test_every_template_and_static_file_is_package_data():
    patterns = _setuptools_config()["package-data"]["portfolio_site"]
    shipped = [
        PurePosixPath(p.relative_to(PACKAGE_DIR).as_posix())
        for folder in (site_config.TEMPLATES_DIR, site_config.STATIC_ROOT)
        for p in folder.rglob("*")
        if p.is_file()
    ]
    assert shipped
    unshipped = [str(p) for p in shipped if not any(p.match(pat) for pat in patterns)]
    assert unshipped == []


def test_only_the_package_is_installed():
    cfg = _setuptools_config()
    assert cfg["packages"] == ["portfolio_site"]
    assert "py-modules" not in cfg


def test_render_does_not_depend_on_working_directory(tmp_path, monkeypatch, soup):
    monkeypatch.chdir(tmp_path)
    s = soup(render_page())
    assert s.select_one("nav a[href='/blog']").get_text() == "Blog"
