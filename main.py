from errors import ScanError
from models.pixel_source import PixelSource
from scanners.scan_strategy import create_scan_strategy
from utils.color_distance import get_distance_function
from utils.image_io import load_images, ensure_output_dir
from visualization.canvas import Canvas
from visualization.save_outputs import save_all_outputs

from config import (
    SELECTED_IMAGE_PATTERN,
    OUTPUT_FOLDER,
    get_active_params,
)


def scan_image(image, params):
    """
    Runs every configured scan direction over one image.

    Returns:
        dict direction -> (marker canvas image, elapsed milliseconds)
    """
    source = PixelSource(image)
    height, width = source.height, source.width
    distance_fn = get_distance_function(params["DISTANCE_FUNCTION"])

    results = {}
    for direction in params["SCAN_DIRECTIONS"]:
        canvas = Canvas(width, height, background=params["CANVAS_BACKGROUND"])
        scanner = create_scan_strategy(
            direction,
            source,
            canvas,
            params["EDGE_COLOR"],
            distance_fn,
            angle=params["INCLINE_ANGLE"],
        )
        elapsed = scanner.scan(width, height, params["MAX_EDGES"], params["TOLERANCE"])
        results[direction] = (canvas.image, elapsed)

    return results


def process_image(image, image_name: str, output_dir=None) -> bool:
    """
    Runs the complete pipeline for one image:
      1. Row / column / inclined scans (as configured)
      2. Timing report per direction
      3. Save marker maps and overlays

    Returns True when every output was written.
    """

    print(f"\n=== Processing image with name: {image_name} ===")
    params = get_active_params()
    output_dir = OUTPUT_FOLDER if output_dir is None else output_dir

    try:
        results = scan_image(image, params)
    except ScanError as exc:
        print(f"[ERROR] Scan failed for {image_name}: {exc}")
        return False

    total = 0.0
    for direction, (_, elapsed) in results.items():
        print(f"  {direction:<9} scan: {elapsed:8.1f} ms")
        total += elapsed

    try:
        save_all_outputs(
            output_dir=output_dir,
            image_id=image_name,
            base_image=image,
            marker_maps={direction: marker_map for direction, (marker_map, _) in results.items()},
            edge_color=params["EDGE_COLOR"],
        )
    except OSError as exc:
        print(f"[ERROR] Could not save outputs for {image_name}: {exc}")
        return False

    print(f"[OK] Finished {image_name} in {total:.1f} ms")
    return True


def main(path_pattern=None, output_dir=None):
    """
    Scans every image matching `path_pattern` (config default when None)
    and writes the outputs to `output_dir`.
    """
    path_pattern = SELECTED_IMAGE_PATTERN if path_pattern is None else path_pattern
    output_dir = OUTPUT_FOLDER if output_dir is None else output_dir
    ensure_output_dir(output_dir)

    images, names, skipped = load_images(path_pattern)
    if not images:
        print(f"[ERROR] No readable images matched pattern: {path_pattern}")
        return

    done = sum(
        process_image(img, name, output_dir) for img, name in zip(images, names)
    )

    print(f"\n=== Processed {done}/{len(images)} images ({len(skipped)} unreadable) ===")


if __name__ == "__main__":
    main()
