"""Application keys for type-safe app configuration access."""

from aiohttp import web

from subpath_serve.config import Config

config_key = web.AppKey("config", Config)
link_label_key = web.AppKey("link_label", str)
