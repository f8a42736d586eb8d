from bs4 import BeautifulSoup
from navcatalog.document_source import parse_markup
from navcatalog.extractor import CatalogExtractor, extract_catalog, resolve_link


def extract(markup):
    return extract_catalog(parse_markup(markup))


def test_extracts_sample_page(sample_page, sample_catalog):
    catalog = extract(sample_page)
    assert catalog == sample_catalog


def test_banner_and_contact_headings_are_not_categories():
    catalog = extract("""
        <h1>Alans的导航站</h1>
        <h1>常用推荐</h1><div><h4><a href="https://a.example.com">A</a></h4></div>
        <h1>联系我</h1>
    """)
    names = [category.name for category in catalog.categories]
    assert "常用推荐" in names
    assert "联系我" not in names
    assert "Alans的导航站" not in names


def test_rejected_heading_keeps_previous_category_open():
    catalog = extract("""
        <h1>Tools</h1><div><h4><a href="https://a.example.com">A</a></h4></div>
        <h1>联系我</h1><div><h4><a href="https://b.example.com">B</a></h4></div>
    """)
    assert len(catalog.categories) == 1
    assert [site.name for site in catalog.categories[0].sites] == ["A", "B"]


def test_site_before_any_category_is_ignored():
    catalog = extract("""
        <div><h4><a href="https://early.example.com">Early</a></h4></div>
        <h1>Tools</h1><div><h4><a href="https://a.example.com">A</a></h4></div>
    """)
    assert [site.url for site in catalog.categories[0].sites] == ["https://a.example.com"]


def test_duplicate_url_keeps_first_occurrence():
    catalog = extract("""
        <h1>Tools</h1>
        <div><h4><a href="https://example.com">First</a></h4></div>
        <div><h4><a href="https://example.com">Second</a></h4></div>
    """)
    sites = catalog.categories[0].sites
    assert len(sites) == 1
    assert sites[0].name == "First"


def test_same_url_allowed_in_different_categories():
    catalog = extract("""
        <h1>One</h1><div><h4><a href="https://example.com">A</a></h4></div>
        <h1>Two</h1><div><h4><a href="https://example.com">A</a></h4></div>
    """)
    assert [len(category.sites) for category in catalog.categories] == [1, 1]


def test_missing_paragraph_gives_empty_description():
    catalog = extract('<h1>Tools</h1><div><h4><a href="https://example.com">A</a></h4></div>')
    site = catalog.categories[0].sites[0]
    assert site.description == ""
    assert site.icon == ""
    assert "description" in site.to_dict()


def test_first_paragraph_and_image_of_container_are_used():
    catalog = extract("""
        <h1>Tools</h1>
        <div>
          <img src="https://example.com/one.png"><img src="https://example.com/two.png">
          <h4><a href="https://example.com">A</a></h4>
          <p> first </p><p>second</p>
        </div>
    """)
    site = catalog.categories[0].sites[0]
    assert site.description == "first"
    assert site.icon == "https://example.com/one.png"


def test_site_without_container_has_empty_fields():
    catalog = extract('<h1>Tools</h1><section><h4><a href="https://example.com">A</a></h4><p>x</p></section>')
    site = catalog.categories[0].sites[0]
    assert (site.description, site.icon) == ("", "")


def test_relative_and_missing_links_are_discarded():
    catalog = extract("""
        <h1>Tools</h1>
        <div><h4><a href="/relative">Relative</a></h4></div>
        <div><h4><a>No href</a></h4></div>
        <div><h4><a href="mailto:me@example.com">Mail</a></h4></div>
        <div><h4><a href="https://ok.example.com">Ok</a></h4></div>
    """)
    assert [site.name for site in catalog.categories[0].sites] == ["Ok"]


def test_empty_categories_are_dropped_and_order_kept():
    catalog = extract("""
        <h1>Empty</h1>
        <h1>B</h1><div><h4><a href="https://b.example.com">B1</a></h4></div>
        <h1>Also empty</h1><div><h4><a href="/nope">x</a></h4></div>
        <h1>A</h1><div><h4><a href="https://a.example.com">A1</a></h4></div>
    """)
    assert [category.name for category in catalog.categories] == ["B", "A"]
    assert [category.id for category in catalog.categories] == ["category-2", "category-4"]


def test_empty_heading_is_not_a_category():
    catalog = extract("""
        <h1>Tools</h1><div><h4><a href="https://a.example.com">A</a></h4></div>
        <h1>   </h1><div><h4><a href="https://b.example.com">B</a></h4></div>
    """)
    assert len(catalog.categories) == 1
    assert len(catalog.categories[0].sites) == 2


def test_link_resolution_order():
    soup = BeautifulSoup("""
        <div>
          <a href="https://around.example.com"><h4 id="around">x</h4></a>
          <h4 id="inside"><a href="https://inside.example.com">y</a></h4>
        </div>
        <div><h4 id="beside">z</h4><a href="https://beside.example.com">go</a></div>
    """, "html.parser")
    assert resolve_link(soup.find(id="inside"))["href"] == "https://inside.example.com"
    assert resolve_link(soup.find(id="around"))["href"] == "https://around.example.com"
    assert resolve_link(soup.find(id="beside"))["href"] == "https://beside.example.com"


def test_custom_tags_and_titles():
    extractor = CatalogExtractor(category_tag="h2", site_tag="h3",
                                 excluded_titles={"Skip"}, always_admitted_titles=set())
    catalog = extractor.extract(parse_markup("""
        <h2>Skip</h2><div><h3><a href="https://skip.example.com">S</a></h3></div>
        <h2>Keep</h2><div><h3><a href="https://keep.example.com">K</a></h3></div>
    """))
    assert [category.name for category in catalog.categories] == ["Keep"]


def test_always_admitted_title_wins_over_exclusion():
    extractor = CatalogExtractor(excluded_titles={"常用推荐"}, always_admitted_titles={"常用推荐"})
    assert extractor.is_category_title("常用推荐")
    assert not extractor.is_category_title("")


def test_no_duplicate_urls_in_any_category(sample_page):
    catalog = extract(sample_page + sample_page)
    for category in catalog.categories:
        urls = [site.url for site in category.sites]
        assert len(urls) == len(set(urls)), "Category should not contain duplicate URLs"
        assert category.sites, "Empty categories should not be emitted"
