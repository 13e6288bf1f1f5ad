from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

try:
    from PIL import Image
except ImportError:  # pragma: no cover - optional dependency
    Image = None

IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".webp", ".gif", ".bmp", ".tif", ".tiff"}
NATIVE_FORMATS = {"JPEG", "PNG", "WEBP"}


@dataclass
class OptimizeResult:
    success: bool
    original_size: int = 0
    optimized_size: int = 0
    savings_percent: float = 0.0
    format: str = ""
    width: int = 0
    height: int = 0
    error: str = ""


@dataclass
class BatchSummary:
    processed: int = 0
    failed: int = 0
    original_bytes: int = 0
    optimized_bytes: int = 0

    @property
    def saved_bytes(self) -> int:
        return self.original_bytes - self.optimized_bytes

    @property
    def savings_percent(self) -> float:
        if not self.original_bytes:
            return 0.0
        return round(self.saved_bytes / self.original_bytes * 100, 2)


class ImageOptimizer(Protocol):
    available: bool

    def optimize(
        self, input_path: Path, output_path: Path, quality: int, max_width: int, max_height: int
    ) -> OptimizeResult: ...


def output_format(source_format: str) -> str:
    source_format = (source_format or "").upper()
    return source_format if source_format in NATIVE_FORMATS else "JPEG"


def savings(original_size: int, optimized_size: int) -> float:
    if not original_size:
        return 0.0
    return round((original_size - optimized_size) / original_size * 100, 2)


class PillowImageOptimizer:
    available = True

    def optimize(
        self, input_path: Path, output_path: Path, quality: int, max_width: int, max_height: int
    ) -> OptimizeResult:
        try:
            original_size = input_path.stat().st_size
            with Image.open(input_path) as img:
                fmt = output_format(img.format)
                width, height = img.size
                if width > max_width or height > max_height:
                    img.thumbnail((max_width, max_height), Image.Resampling.LANCZOS)
                save_kwargs: dict = {"optimize": True}
                if fmt == "JPEG":
                    if img.mode not in ("RGB", "L"):
                        img = img.convert("RGB")
                    save_kwargs.update(quality=quality, progressive=True)
                elif fmt == "WEBP":
                    save_kwargs["quality"] = quality
                output_path.parent.mkdir(parents=True, exist_ok=True)
                img.save(output_path, fmt, **save_kwargs)
                width, height = img.size
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            return OptimizeResult(success=False, error=str(exc))
        optimized_size = output_path.stat().st_size
        return OptimizeResult(
            success=True,
            original_size=original_size,
            optimized_size=optimized_size,
            savings_percent=savings(original_size, optimized_size),
            format=fmt.lower(),
            width=width,
            height=height,
        )


class NullImageOptimizer:
    available = False

    def optimize(
        self, input_path: Path, output_path: Path, quality: int, max_width: int, max_height: int
    ) -> OptimizeResult:
        return OptimizeResult(success=False, error="Image optimization disabled: Pillow is not installed.")


def create_image_optimizer() -> ImageOptimizer:
    if Image is None:
        return NullImageOptimizer()
    return PillowImageOptimizer()


def iter_images(source_dir: Path, skip_dir: Optional[Path] = None) -> list[Path]:
    skip = skip_dir.resolve() if skip_dir is not None else None
    images = []
    for path in sorted(source_dir.rglob("*"), key=lambda p: p.as_posix()):
        if not path.is_file() or path.suffix.lower() not in IMAGE_EXTS:
            continue
        if skip is not None and path.resolve().is_relative_to(skip):
            continue
        images.append(path)
    return images


def destination_for(path: Path, source_dir: Path, dest_dir: Path) -> Path:
    dest = dest_dir / path.relative_to(source_dir)
    if path.suffix.lower() not in {".jpg", ".jpeg", ".png", ".webp"}:
        dest = dest.with_suffix(".jpg")
    return dest


def optimize_directory(
    optimizer: ImageOptimizer,
    source_dir: Path,
    dest_dir: Path,
    quality: int,
    max_width: int,
    max_height: int,
) -> BatchSummary:
    summary = BatchSummary()
    for path in iter_images(source_dir, skip_dir=dest_dir):
        rel = path.relative_to(source_dir).as_posix()
        result = optimizer.optimize(
            path, destination_for(path, source_dir, dest_dir), quality, max_width, max_height
        )
        if not result.success:
            summary.failed += 1
            print(f"  - Failed: {rel}: {result.error}")
            continue
        summary.processed += 1
        summary.original_bytes += result.original_size
        summary.optimized_bytes += result.optimized_size
        print(
            f"  - {rel}: {result.original_size // 1024}KB -> "
            f"{result.optimized_size // 1024}KB ({result.savings_percent:.1f}% saved)"
        )
    return summary
