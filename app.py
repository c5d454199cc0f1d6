"""
Recipe Box

Application factory, database initialization and CLI commands.
The store handle is built here and shared with the views through
app.extensions.
"""

import logging

import click
from flask import Flask
from flask_migrate import Migrate

from api import bp as api_bp
from config import get_config
from models import db
from persistence import Store
from services.sample_data import load_if_empty

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

migrate = Migrate()


def configure_logging(app):
    """Send application logs to stderr at the configured level."""
    logging.basicConfig(format=LOG_FORMAT)
    level = str(app.config['LOG_LEVEL']).upper()
    for name in ('persistence', 'services', 'api', app.import_name):
        logging.getLogger(name).setLevel(level)
    app.logger.setLevel(level)


def create_app(config_name=None):
    """Build the Flask app for the given config name (see config.py)."""
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    app.extensions['recipe_store'] = Store(db.session)

    app.register_blueprint(api_bp)

    register_commands(app)
    init_db(app)
    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    """Create missing tables and seed sample data on first run."""
    with app.app_context():
        db.create_all()
        if app.config['LOAD_SAMPLE_DATA']:
            load_if_empty(app.extensions['recipe_store'])


def register_commands(app):

    @app.cli.command('init-db')
    def init_db_command():
        """Create database tables."""
        db.create_all()
        click.echo('Initialized the database.')

    @app.cli.command('load-sample-data')
    def load_sample_data_command():
        """Seed the sample recipes if the store is empty."""
        if load_if_empty(app.extensions['recipe_store']):
            click.echo('Sample data loaded.')
        else:
            click.echo('Store is not empty, nothing loaded.')


if __name__ == '__main__':
    app = create_app()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
