"""
Favicon asset pipeline: decides whether to (re)build, renders the icon set
and returns the <link> snippet.

Regeneration is keyed on the output folder: a fresh folder (or a production
build) triggers a full build, an existing one is trusted as is. There is no
content hashing.
"""

import concurrent.futures as cf
import enum
import os
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

from . import images
from .config import FaviconConfig
from .fsutil import PathLike, copy_file, ensure_folder, is_file
from .log import to_log
from .manifest import create_manifest
from .markup import get_html_code

ICO_SOURCE_SIZE = 512
ICO_SIZES = (64, 32, 24)
ICO_FIT = "cover"

RenderResult = Union[str, bool, None]


class Decision(enum.Enum):
    BUILD = "build"
    SKIP = "skip"


def decide_regeneration(production: bool, folder_existed: bool) -> Decision:
    if production or not folder_existed:
        return Decision.BUILD
    return Decision.SKIP


def effective_sizes(size_list: Any) -> List[int]:
    """Configured sizes plus the mandatory 512, de-duplicated in order of first occurrence."""
    valid = list(size_list) if isinstance(size_list, (list, tuple)) and size_list else []
    return list(dict.fromkeys(valid + [ICO_SOURCE_SIZE]))


def png_name(prefix: str, size: int) -> str:
    return f"{prefix}-{size}x{size}.png"


def run_all(tasks: Iterable[Callable[[], Any]], max_workers: Optional[int] = None) -> List[Any]:
    """
    Run every task in a thread pool and wait for all of them.
    The first failure in submission order is re-raised once the pool is done;
    siblings are not cancelled and their output stays on disk.
    """
    tasks = list(tasks)
    if not tasks:
        return []
    workers = max_workers or min(len(tasks), os.cpu_count() or 4)
    with cf.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(task) for task in tasks]
        cf.wait(futures)
    return [fut.result() for fut in futures]


class FaviconPipeline:
    def __init__(
        self,
        config: FaviconConfig,
        output_root: PathLike,
        production: bool = False,
        max_workers: Optional[int] = None,
    ) -> None:
        self.config = config
        self.output_root = Path(output_root)
        self.production = production
        self.max_workers = max_workers

    @property
    def output_dir(self) -> Path:
        return self.output_root / self.config.output_folder

    def render(self, source_img: PathLike) -> RenderResult:
        """Shortcode entry point. Never raises: failures are logged and give None."""
        try:
            if self.config.run_only_dev_mode and self.production:
                to_log("favicon compilation is required only in dev mode", "info")
                return get_html_code(self.config)

            folder_existed = ensure_folder(self.output_dir)

            if decide_regeneration(self.production, folder_existed) is Decision.BUILD:
                if not self.build(Path(source_img)):
                    return False

            return get_html_code(self.config)

        except Exception as e:
            to_log(f"{e}", "error")
            return None

    def build(self, source: Path) -> bool:
        if not is_file(source):
            return False

        to_log("starting favicons creation...", "info")

        prefix = self.config.prefix_name
        out_dir = self.output_dir

        copy_file(source, out_dir / f"{prefix}.svg")

        sizes = effective_sizes(self.config.size_list)
        run_all(
            (
                lambda size=size: images.resize_to_png(source, size, out_dir / png_name(prefix, size))
                for size in sizes
            ),
            max_workers=self.max_workers,
        )

        png_512 = out_dir / png_name(prefix, ICO_SOURCE_SIZE)
        if not is_file(png_512):
            return False

        images.pack_ico([png_512], out_dir / f"{prefix}.ico", sizes=ICO_SIZES, fit=ICO_FIT)

        if self.config.manifest_generate:
            create_manifest(self.config, self.output_root, sizes)

        to_log(f"DONE  {source.name} -> {[f'{s}px' for s in sizes]}", "info")
        return True
