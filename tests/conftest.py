import pytest
from navcatalog import create_app
from navcatalog.catalog_store import save_catalog
from navcatalog.config import Config
from navcatalog.models import Category, NavigationCatalog, Site

SAMPLE_PAGE = """<!DOCTYPE html>
<html>
<body>
<h1>Alans的导航站</h1>
<h4><a href="https://early.example.com">Early</a></h4>
<div class="section">
  <h1 id="recommend">常用推荐</h1>
  <div class="card">
    <a href="https://github.com"><img src="https://github.com/favicon.ico"><h4> GitHub </h4></a>
    <p>code hosting</p>
  </div>
  <div class="card">
    <h4><a href="https://gitee.com">Gitee</a></h4>
  </div>
  <div class="card">
    <h4>Docs</h4><a href="https://docs.example.com">open</a>
    <p> our git workflow </p>
  </div>
  <div class="card">
    <h4>Local</h4><a href="/local">local</a>
  </div>
  <div class="card">
    <h4><a href="https://github.com">GitHub mirror</a></h4>
  </div>
</div>
<h1>AI 工具</h1>
<div class="card">
  <h4><a href="https://chat.openai.com">ChatGPT</a></h4>
  <p>chat</p>
  <img src="https://chat.openai.com/icon.png">
</div>
<h1>空分类</h1>
</body>
</html>
"""


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


@pytest.fixture
def sample_catalog():
    return NavigationCatalog(categories=[
        Category(id="recommend", name="常用推荐", sites=[
            Site(name="GitHub", url="https://github.com", icon="https://github.com/favicon.ico",
                 description="code hosting"),
            Site(name="Gitee", url="https://gitee.com"),
            Site(name="Docs", url="https://docs.example.com", description="our git workflow"),
        ]),
        Category(id="category-2", name="AI 工具", sites=[
            Site(name="ChatGPT", url="https://chat.openai.com", icon="https://chat.openai.com/icon.png",
                 description="chat"),
        ]),
    ])


@pytest.fixture
def catalog_file(tmp_path, sample_catalog):
    file_path = tmp_path / "data" / "navigation.json"
    save_catalog(sample_catalog, str(file_path))
    return file_path


def make_config(catalog_path):
    return type("TestConfig", (Config,), {"TESTING": True, "CATALOG_PATH": str(catalog_path)})


@pytest.fixture
def app(catalog_file):
    return create_app(make_config(catalog_file))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def missing_catalog_client(tmp_path):
    return create_app(make_config(tmp_path / "missing.json")).test_client()
