"""Web app manifest for the generated icon set."""

import json
import posixpath
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .config import FaviconConfig
from .fsutil import PathLike, ensure_folder
from .log import to_log
from .markup import get_file_path

MANIFEST_ICON_SIZES = (192, 256, 512)
ICON_MIME_TYPE = "image/png"


def build_manifest(config: FaviconConfig, sizes: Sequence[int]) -> Dict[str, Any]:
    file_path = get_file_path(config.img_path_href, config.output_folder)

    icons: List[Dict[str, str]] = [
        {
            "src": posixpath.join(file_path, f"{config.prefix_name}-{size}x{size}.png"),
            "sizes": f"{size}x{size}",
            "type": ICON_MIME_TYPE,
        }
        for size in sizes
        if size in MANIFEST_ICON_SIZES
    ]

    return {
        "name": config.manifest_field("name"),
        "short_name": config.manifest_field("short_name"),
        "description": config.manifest_field("description"),
        "start_url": config.manifest_field("start_url"),
        "display": config.manifest_field("display"),
        "background_color": config.manifest_field("background_color"),
        "theme_color": config.manifest_field("theme_color"),
        "icons": icons,
    }


def create_manifest(config: FaviconConfig, output_root: PathLike, sizes: Sequence[int]) -> None:
    """Write the manifest, replacing any previous one. Failures are logged and never raised."""
    try:
        manifest_dir = Path(output_root) / config.manifest_output_folder
        ensure_folder(manifest_dir)

        text = json.dumps(build_manifest(config, sizes), indent=2, ensure_ascii=False)
        (manifest_dir / f"{config.manifest_name}.json").write_text(text, encoding="utf-8")

        to_log(f"{config.manifest_name}.json created successfully", "info")
    except (OSError, TypeError, ValueError) as e:
        to_log(f"error while creating {config.manifest_name}.json: {e}", "error")
