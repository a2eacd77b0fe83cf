import argparse
import logging
import sys

import uvicorn

from radarchart import __version__
from radarchart.cache import MemoryImageCache
from radarchart.exceptions import ConfigurationError
from radarchart.logger import ConsoleLogger
from radarchart.render import ChartRenderer
from radarchart.settings import Settings
from radarchart.themes import get_theme, list_themes
from radarchart.web_server import ChartWebServer

logger = ConsoleLogger(name="main_web", level=logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="radarchart Web Server - legacy chart URL to PNG radar charts"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: from RADARCHART_HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: from RADARCHART_PORT or 8080)",
    )
    parser.add_argument(
        "--theme",
        type=str,
        choices=list_themes(),
        default=None,
        help="Chart theme (default: from RADARCHART_THEME or legacy)",
    )
    parser.add_argument(
        "--cache-ttl",
        type=int,
        default=None,
        help="Seconds a rendered chart stays cached (default: 300)",
    )
    parser.add_argument(
        "--sweep-interval",
        type=int,
        default=None,
        help="Seconds between purges of expired cache entries (default: 600)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level for all components (default: from RADARCHART_LOG_LEVEL or INFO)",
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line overrides applied, then validated"""
    settings = Settings.from_env()

    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.theme:
        settings.render.theme = args.theme
    if args.cache_ttl is not None:
        settings.cache.ttl_seconds = args.cache_ttl
    if args.sweep_interval is not None:
        settings.cache.sweep_interval_seconds = args.sweep_interval
    if args.log_level:
        settings.log.level = args.log_level

    settings.validate()
    return settings


def build_server(settings: Settings) -> ChartWebServer:
    """Construct the process-wide services and inject them into the web server"""
    log_level = settings.log.get_level()

    cache = MemoryImageCache(
        ttl_seconds=settings.cache.ttl_seconds,
        sweep_interval_seconds=settings.cache.sweep_interval_seconds,
        logger=ConsoleLogger(name="image_cache", level=log_level),
    )
    renderer = ChartRenderer(
        theme=get_theme(settings.render.theme),
        axis_max=settings.render.axis_max,
        logger=ConsoleLogger(name="renderer", level=log_level),
    )
    return ChartWebServer(
        cache=cache,
        renderer=renderer,
        max_age=settings.cache.max_age_header,
        log_level=log_level,
    )


def main() -> None:
    args = build_parser().parse_args()

    try:
        settings = load_settings(args)
    except ConfigurationError as e:
        logger.error("FATAL: Configuration error", error=str(e))
        sys.exit(1)

    logger.set_level(settings.log.get_level())
    server = build_server(settings)

    try:
        banner = f"""
{'='*80}
  radarchart Web Server - Starting
{'='*80}
  Version:          {__version__}
  Host:             {settings.server.host}
  Port:             {settings.server.port}
  Theme:            {settings.render.theme}
  Cache TTL:        {settings.cache.ttl_seconds}s (sweep every {settings.cache.sweep_interval_seconds}s)

  Endpoints:
    - Chart:         http://{settings.server.host}:{settings.server.port}/chart
    - Health Check:  http://{settings.server.host}:{settings.server.port}/ping

  Example:
    curl -o chart.png "http://localhost:{settings.server.port}/chart?cht=r&chs=225x225&chd=t:69,77,58,61,72|40,70,50,60,72&chxl=0:|note|mus|reg|ent|pab|jock"
{'='*80}
        """
        print(banner)

        logger.info(
            "Starting web server",
            host=settings.server.host,
            port=settings.server.port,
            theme=settings.render.theme,
            cache_ttl=settings.cache.ttl_seconds,
            sweep_interval=settings.cache.sweep_interval_seconds,
        )
        uvicorn.run(server.app, host=settings.server.host, port=settings.server.port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
