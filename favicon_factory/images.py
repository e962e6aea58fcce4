"""
Image capability used by the pipeline: resize to NxN PNG, pack PNGs into an ICO.

Raster sources go through Pillow. SVG sources are rasterised with CairoSVG at
the target size first, so small icons stay sharp.
"""

from io import BytesIO
from pathlib import Path
from typing import Iterable, List, Sequence

from PIL import Image, ImageOps

from .fsutil import PathLike

SVG_EXTS = {".svg", ".svgz"}
FIT_POLICIES = ("cover", "contain")
LANCZOS = Image.Resampling.LANCZOS


def is_svg(path: Path) -> bool:
    return path.suffix.lower() in SVG_EXTS


def rasterise_svg(src: Path, size: int) -> Image.Image:
    import cairosvg

    png_bytes = cairosvg.svg2png(url=str(src), output_width=size, output_height=size)
    return Image.open(BytesIO(png_bytes)).convert("RGBA")


def load_source_image(src: PathLike, size: int) -> Image.Image:
    src = Path(src)
    if is_svg(src):
        return rasterise_svg(src, size)
    with Image.open(src) as im:
        return im.convert("RGBA")


def resize_to_png(source: PathLike, size: int, dest: PathLike) -> Path:
    """Render the source at size x size and write it as PNG, replacing any existing file."""
    img = load_source_image(source, size)
    if img.size != (size, size):
        img = img.resize((size, size), LANCZOS)
    dest = Path(dest)
    img.save(dest, format="PNG", optimize=True)
    return dest


def fit_square(img: Image.Image, size: int, fit: str) -> Image.Image:
    if fit == "cover":
        return ImageOps.fit(img, (size, size), LANCZOS)
    return ImageOps.pad(img, (size, size), LANCZOS)


def pack_ico(sources: Sequence[PathLike], dest: PathLike, sizes: Iterable[int], fit: str = "cover") -> Path:
    """
    Pack the first source image into one multi-resolution ICO.
    fit="cover" scales and crops to fill each square, fit="contain" pads instead.
    """
    if fit not in FIT_POLICIES:
        raise ValueError(f"unknown fit policy: {fit!r}")
    if not sources:
        raise ValueError("no source images to pack")

    with Image.open(sources[0]) as im:
        base = im.convert("RGBA")

    # largest frame first, Pillow picks the others from append_images by size
    frames: List[Image.Image] = [fit_square(base, s, fit) for s in sorted(set(sizes), reverse=True)]
    if not frames:
        raise ValueError("no ico sizes given")
    dest = Path(dest)
    frames[0].save(
        dest,
        format="ICO",
        sizes=[f.size for f in frames],
        append_images=frames[1:],
    )
    return dest
