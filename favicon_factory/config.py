"""
Plugin configuration: defaults, user overrides and the build environment flag.

Overrides are merged shallowly onto DEFAULT_CONFIG, so a user "manifest_data"
mapping replaces the default one as a whole. Unknown keys are ignored.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .log import to_log

# Optional environment override for the build mode
SITE_ENV = "SITE_ENV"
PRODUCTION = "production"

DEFAULT_MANIFEST_DATA: Dict[str, str] = {
    "name": "MyApp",
    "short_name": "MyApp but short",
    "description": "Progressive Web App",
    "start_url": "/",
    "display": "standalone",
    "background_color": "#ffffff",
    "theme_color": "#000000",
}

DEFAULT_SIZE_LIST: List[int] = [
    16,   # legacy browsers address bar
    32,   # hd address bar, windows 10 minimum
    48,   # windows app / desktop
    57,   # iphone (ios 6 or below)
    72,   # ipad (ios 6 or below)
    76,   # ipad (ios 7+)
    96,   # android chrome tab / shortcut
    114,  # iphone retina (ios 6 or below)
    120,  # iphone retina (ios 7+)
    144,  # android, windows
    152,  # ipad retina (ios 7+)
    180,  # iphone retina hd (ios 8+)
    192,  # android / pwa
    256,  # windows / chrome desktop
    512,  # android 8.0+ and pwa, source of the ico
]

DEFAULT_CONFIG: Dict[str, Any] = {
    # output folder for img files, relative to the site output dir
    "output_folder": "favicon",
    # name prefix for generated files
    "prefix_name": "favicon",
    # public url prefix, usually left empty
    "img_path_href": "",
    "manifest_generate": True,
    "manifest_name": "manifest",
    # relative to the site output dir, empty means its root
    "manifest_output_folder": "",
    "manifest_data": DEFAULT_MANIFEST_DATA,
    "size_list": DEFAULT_SIZE_LIST,
    # set to False to generate files in production builds too
    "run_only_dev_mode": True,
    # indentation (tabs) for the generated html
    "tab_indent": 2,
}


def _freeze_sizes(value: Any) -> Tuple[Any, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


@dataclass(frozen=True)
class FaviconConfig:
    output_folder: str = "favicon"
    prefix_name: str = "favicon"
    img_path_href: str = ""
    manifest_generate: bool = True
    manifest_name: str = "manifest"
    manifest_output_folder: str = ""
    manifest_data: Mapping[str, Any] = field(default_factory=lambda: dict(DEFAULT_MANIFEST_DATA))
    size_list: Tuple[Any, ...] = tuple(DEFAULT_SIZE_LIST)
    run_only_dev_mode: bool = True
    tab_indent: int = 2

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]] = None) -> "FaviconConfig":
        merged = {**DEFAULT_CONFIG, **(overrides or {})}
        unknown = sorted(k for k in merged if k not in DEFAULT_CONFIG)
        if unknown:
            to_log(f"ignoring unknown config keys: {', '.join(unknown)}")
        values = {k: merged[k] for k in DEFAULT_CONFIG}
        values["manifest_data"] = dict(values["manifest_data"] or {})
        values["size_list"] = _freeze_sizes(values["size_list"])
        return cls(**values)

    def manifest_field(self, key: str) -> Any:
        """Manifest value, falling back to the default when the user mapping omits it."""
        return self.manifest_data.get(key, DEFAULT_MANIFEST_DATA.get(key))


def load_config_file(json_path: Path) -> Dict[str, Any]:
    """
    Read overrides from an optional JSON object, e.g.:
      {
        "output_folder": "assets/icons",
        "size_list": [16, 32, 180, 512]
      }
    A missing or unreadable file yields no overrides.
    """
    json_path = Path(json_path)
    if not json_path.exists():
        return {}
    try:
        data = json.loads(json_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        to_log(f"error reading config {json_path}: {e}", "error")
        return {}
    if not isinstance(data, dict):
        to_log(f"config {json_path} is not a JSON object, ignored", "error")
        return {}
    return data


def is_production(env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return env.get(SITE_ENV, "").strip().lower() == PRODUCTION
