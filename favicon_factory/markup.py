"""
Public paths and the <link> snippet for the generated favicons.

The snippet follows the configured size list, not what was generated in this
run, so a production build reusing old assets emits the same markup.
"""

import posixpath
from typing import List, Sequence

from .config import FaviconConfig

APPLE_TOUCH_SIZES = (57, 72, 76, 114, 120, 144, 152, 180)


def get_file_path(img_path_href: str, output_folder: str) -> str:
    if img_path_href:
        return img_path_href
    return "/" + output_folder.lstrip("/")


def get_manifest_href(config: FaviconConfig) -> str:
    manifest_path = posixpath.join(config.manifest_output_folder, f"{config.manifest_name}.json")
    return "/" + manifest_path.lstrip("/")


def indent_lines(lines: Sequence[str], tab_indent: int) -> str:
    # the first line is embedded inline by the caller
    pad = "\t" * max(0, tab_indent)
    return "\n".join(line if i == 0 else pad + line for i, line in enumerate(lines))


def get_html_code(config: FaviconConfig) -> str:
    file_path = get_file_path(config.img_path_href, config.output_folder)
    prefix = config.prefix_name
    sizes = config.size_list

    html_code: List[str] = [
        # universal fallback
        f'<link rel="shortcut icon" href="{file_path}/{prefix}.ico" type="image/x-icon">',
        # modern browsers
        f'<link rel="icon" href="{file_path}/{prefix}.svg" type="image/svg+xml">',
    ]

    if 32 in sizes:
        html_code.append(f'<link rel="icon" type="image/png" sizes="32x32" href="{file_path}/{prefix}-32x32.png">')
    if 16 in sizes:
        html_code.append(f'<link rel="icon" type="image/png" sizes="16x16" href="{file_path}/{prefix}-16x16.png">')
    if 512 in sizes:
        html_code.append(f'<link rel="apple-touch-icon" href="{file_path}/apple-touch-icon.png">')

    for size in APPLE_TOUCH_SIZES:
        if size in sizes:
            html_code.append(
                f'<link rel="apple-touch-icon" sizes="{size}x{size}" href="{file_path}/apple-touch-icon-{size}x{size}.png">'
            )

    if config.manifest_generate:
        html_code.append(f'<link rel="manifest" href="{get_manifest_href(config)}">')

    return indent_lines(html_code, config.tab_indent)
