"""aiohttp server for subpath-serve.

Application factory and route registration.
"""

from aiohttp import web

from subpath_serve.api.files import create_files_routes
from subpath_serve.app_keys import config_key, link_label_key
from subpath_serve.config import Config
from subpath_serve.core.renderer import external_link_label


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Validated application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[config_key] = config
    app[link_label_key] = external_link_label(config.serve.git_http_prefix)

    app.router.add_routes(create_files_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server until interrupted.

    Args:
        config: Validated application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
