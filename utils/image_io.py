"""
Image I/O utilities for the edge-profile scanner.

This module provides:
    • load_images(path_pattern)   (reports unreadable files)
    • extract_image_id(filename)
    • ensure_output_dir(path)
    • save_image(path, image)

All filesystem interaction goes through here.
"""

import os
import re
import glob
from typing import List, Tuple

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_image_id(filename: str) -> str:
    """
    Extract the first integer found in the file name, or the bare stem
    when the name has no digits.

    Example:
        'selected/038.png'    → '038'
        'selected/tiles.png'  → 'tiles'
    """
    stem = os.path.splitext(os.path.basename(filename))[0]
    m = re.search(r'\d+', stem)
    return m.group(0) if m else stem


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_images(path_pattern: str) -> Tuple[List[np.ndarray], List[str], List[str]]:
    """
    Loads all images matching the given glob pattern.

    Returns:
        images:   list of np.ndarray (BGR)
        names:    identifiers extracted from filenames, made unique
        skipped:  paths OpenCV could not decode

    Example:
        images, names, skipped = load_images('selected/*.png')
    """

    file_list = sorted(glob.glob(path_pattern))
    images = []
    names = []
    skipped = []
    seen = {}

    for fname in file_list:
        img = cv2.imread(fname, cv2.IMREAD_COLOR)
        if img is None:
            print(f"[WARN] Could not read {fname}. Skipping.")
            skipped.append(fname)
            continue

        # 'a_01.png' and 'b_01.png' would otherwise share outputs
        image_id = extract_image_id(fname)
        count = seen.get(image_id, 0)
        seen[image_id] = count + 1
        if count:
            image_id = f"{image_id}_{count}"

        images.append(img)
        names.append(image_id)

    return images, names, skipped


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.

    Raises:
        OSError: OpenCV could not encode or write the file
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise OSError(f"could not write image to {path}")
