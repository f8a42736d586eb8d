# routes.py
from flask import request, current_app
from flask_restx import Namespace, Resource, fields
from http import HTTPStatus
from .catalog_store import load_catalog
from .errors import LoadError
from .rendering import category_icon
from .search import visible_sites


def current_catalog():
    return load_catalog(current_app.config["CATALOG_PATH"])


def load_failure(e):
    current_app.logger.error(f"Error loading catalog: {str(e)}")
    return {"success": False, "error": str(e)}, HTTPStatus.SERVICE_UNAVAILABLE


def sites_response(index, keyword):
    try:
        catalog = current_catalog()
    except LoadError as e:
        return load_failure(e)

    category = catalog.category_at(index)
    if category is None:
        return {"success": False, "error": f"Unknown category {index}"}, HTTPStatus.NOT_FOUND

    sites = visible_sites(catalog, index, keyword)
    return {
        "category": category.name,
        "keyword": keyword,
        "total": len(sites),
        "sites": [site.to_dict() for site in sites]
    }


def init_routes(api):
    # One namespace per Api, resources must not leak between app instances
    ns = Namespace('catalog', description='Navigation catalog operations')

    # API models
    site_model = ns.model('Site', {
        'name': fields.String(description='Site name'),
        'url': fields.String(description='Site URL'),
        'icon': fields.String(description='Icon URL, may be empty'),
        'description': fields.String(description='Site description, may be empty')
    })

    category_summary_model = ns.model('CategorySummary', {
        'index': fields.Integer(description='Position of the category in the catalog'),
        'id': fields.String(description='Category identifier'),
        'name': fields.String(description='Category name'),
        'icon': fields.String(description='Decorative category icon'),
        'count': fields.Integer(description='Number of sites in this category')
    })

    sites_result_model = ns.model('SitesResult', {
        'category': fields.String(description='Name of the active category'),
        'keyword': fields.String(description='Search keyword applied'),
        'total': fields.Integer(description='Number of visible sites'),
        'sites': fields.List(fields.Nested(site_model))
    })

    @ns.route('/categories')
    class Categories(Resource):
        @ns.response(200, 'Success', [category_summary_model])
        def get(self):
            """List categories with their site counts"""
            try:
                catalog = current_catalog()
            except LoadError as e:
                return load_failure(e)
            return [
                {
                    "index": index,
                    "id": category.id,
                    "name": category.name,
                    "icon": category_icon(index),
                    "count": len(category.sites)
                }
                for index, category in enumerate(catalog.categories)
            ]

    @ns.route('/categories/<int:index>/sites')
    @ns.param('index', 'Category position')
    @ns.param('q', 'Search keyword (optional)')
    class CategorySites(Resource):
        @ns.response(200, 'Success', sites_result_model)
        def get(self, index):
            """Sites of one category, optionally filtered by keyword"""
            return sites_response(index, request.args.get('q', '').strip())

    @ns.route('/search')
    @ns.param('q', 'Search keyword')
    @ns.param('category', 'Category position (default: 0)')
    class SearchSites(Resource):
        @ns.response(200, 'Success', sites_result_model)
        def get(self):
            """Search the sites of a category by name or description"""
            index = request.args.get('category', 0, type=int)
            return sites_response(index, request.args.get('q', '').strip())

    @ns.route('/status')
    class Status(Resource):
        def get(self):
            """Report whether the catalog artifact can be loaded"""
            try:
                catalog = current_catalog()
            except LoadError as e:
                current_app.logger.error(f"Error in status endpoint: {str(e)}")
                return {"status": "error", "message": str(e)}, HTTPStatus.SERVICE_UNAVAILABLE
            return {
                "status": "ready",
                "categories": len(catalog.categories),
                "sites": catalog.site_count()
            }, HTTPStatus.OK

    api.add_namespace(ns)
    return ns
