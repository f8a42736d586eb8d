from flask import Flask, request
from flask_restx import Api
from flask_cors import CORS
from .config import Config, configure_logging
from .catalog_store import load_catalog
from .errors import LoadError
from .rendering import render_page
from .routes import init_routes
from .search import CatalogView


def create_app(config_class=Config):
    configure_logging(config_class.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(config_class)

    CORS(app, resources={r"/api/*": {"origins": "*"}})
    api = Api(app, version='1.0', title='Navigation Catalog API',
              description='Browse and search a categorized directory of sites',
              prefix='/api', doc='/api/docs')

    init_routes(api)

    @app.route('/')
    def index():
        """Server-rendered catalog page"""
        try:
            catalog = load_catalog(app.config["CATALOG_PATH"])
        except LoadError as e:
            app.logger.error(f"Error loading catalog: {str(e)}")
            return render_page(None)

        view = CatalogView(catalog)
        view.switch_category(request.args.get('category', 0, type=int))
        view.set_keyword(request.args.get('q', ''))
        return render_page(view)

    return app
