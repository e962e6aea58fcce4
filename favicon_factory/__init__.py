"""
favicon-factory: favicon set, web app manifest and <link> markup for static sites.

Register it with a site builder that exposes ``output_dir`` and
``add_shortcode(name, func)``:

    import favicon_factory
    favicon_factory.register(site, {"output_folder": "icons"})

Templates then call the ``favicon`` shortcode with the source image path.
"""

from typing import Any, Mapping, Optional

from .config import DEFAULT_CONFIG, FaviconConfig, is_production, load_config_file
from .log import to_log
from .pipeline import Decision, FaviconPipeline, decide_regeneration, effective_sizes

__version__ = "1.0.0"

SHORTCODE_NAME = "favicon"

__all__ = [
    "DEFAULT_CONFIG",
    "Decision",
    "FaviconConfig",
    "FaviconPipeline",
    "decide_regeneration",
    "effective_sizes",
    "is_production",
    "load_config_file",
    "register",
]


def register(
    site: Any,
    config: Optional[Mapping[str, Any]] = None,
    production: Optional[bool] = None,
) -> Optional[FaviconPipeline]:
    """
    Merge the user config onto the defaults and register the favicon shortcode.
    When ``production`` is None the SITE_ENV environment variable decides.
    Errors are logged, the host build carries on.
    """
    try:
        plugin_config = FaviconConfig.from_mapping(config)
        if production is None:
            production = is_production()

        pipeline = FaviconPipeline(plugin_config, site.output_dir, production=production)
        site.add_shortcode(SHORTCODE_NAME, pipeline.render)
        return pipeline

    except Exception as e:
        to_log(e, "error")
        return None
