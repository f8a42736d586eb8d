# rendering.py
import logging
from urllib.parse import urlencode
from markupsafe import escape
from .text_processing import get_initials

logger = logging.getLogger(__name__)

CATEGORY_ICONS = ['⭐', '🤖', '💻', '🔌', '🌐', '☁️', '📦', '⚡', '🛠️', '📚', '👥', '📌']
EMPTY_DESCRIPTION = "暂无描述"
LOAD_FAILURE_MESSAGE = "加载数据失败，请刷新页面重试"
NO_RESULTS_MESSAGE = "没有找到相关网站"
BLANK_GIF = "data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"


def category_icon(index):
    return CATEGORY_ICONS[index % len(CATEGORY_ICONS)]


def animation_delay(index):
    return min(index * 0.05, 0.4)


def page_link(category_index, keyword=""):
    params = {"category": category_index}
    if keyword:
        params["q"] = keyword
    return "/?" + urlencode(params)


def render_category_nav(catalog, active_index, keyword=""):
    items = []
    for index, category in enumerate(catalog.categories):
        active = " active" if index == active_index else ""
        items.append(
            f'<a class="category-item{active}" data-index="{index}" href="{escape(page_link(index, keyword))}">'
            f'<span class="category-icon">{category_icon(index)}</span>'
            f'<span class="category-name">{escape(category.name)}</span>'
            f'<span class="category-count">{len(category.sites)}</span>'
            f'</a>'
        )
    return "\n".join(items)


def render_icon(icon_url, site_name):
    # The badge text is read back from data-initials so no markup is built in the handler
    return (
        f'<img class="site-icon" src="{escape(icon_url)}" alt="{escape(site_name)}" '
        f'data-initials="{escape(get_initials(site_name))}" '
        f'onerror="this.onerror=null; this.classList.add(\'default\'); '
        f'this.setAttribute(\'title\', this.dataset.initials); this.src=\'{BLANK_GIF}\';">'
    )


def render_site_card(site, index):
    description = site.description or EMPTY_DESCRIPTION
    return (
        f'<a href="{escape(site.url)}" class="site-card" target="_blank" rel="noopener noreferrer" '
        f'style="animation-delay: {animation_delay(index):g}s">'
        f'<div class="site-card-header">{render_icon(site.icon, site.name)}'
        f'<div class="site-info"><h3 class="site-name">{escape(site.name)}</h3></div></div>'
        f'<p class="site-description">{escape(description)}</p>'
        f'</a>'
    )


def render_sites_grid(sites):
    cards = []
    for index, site in enumerate(sites):
        try:
            cards.append(render_site_card(site, index))
        except Exception as e:
            logger.error(f"Error rendering site {getattr(site, 'url', '?')}: {str(e)}")
    return "\n".join(cards)


def render_no_results(visible):
    style = "block" if visible else "none"
    return f'<p class="no-results" id="noResults" style="display: {style}">{NO_RESULTS_MESSAGE}</p>'


def render_load_failure():
    return f'<p class="no-results">{LOAD_FAILURE_MESSAGE}</p>'


def render_page(view=None):
    """
    Full catalog page for a CatalogView. Without a view the page carries the
    load failure message in place of the site grid.
    """
    if view is None:
        nav = ""
        title = ""
        keyword = ""
        active_index = 0
        body = render_load_failure()
    else:
        category = view.active_category
        nav = render_category_nav(view.catalog, view.active_index, view.keyword)
        title = category.name if category is not None else ""
        keyword = view.keyword
        active_index = view.active_index
        sites = view.visible_sites()
        body = render_sites_grid(sites) + render_no_results(not sites)

    return f"""<!DOCTYPE html>
<html lang="zh-CN">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>导航</title>
</head>
<body>
<aside class="sidebar" id="sidebar">
<nav class="category-nav" id="categoryNav">
{nav}
</nav>
</aside>
<main class="main-content">
<header class="header">
<h2 class="current-category" id="currentCategory">{escape(title)}</h2>
<form class="search" method="get" action="/">
<input type="hidden" name="category" value="{active_index}">
<input type="search" class="search-box" id="searchBox" name="q" value="{escape(keyword)}" placeholder="搜索网站...">
</form>
</header>
<div class="sites-grid" id="sitesGrid">
{body}
</div>
</main>
</body>
</html>
"""
