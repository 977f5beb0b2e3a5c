"""Page color sampling from screenshots.

Used when only a capture of the page is at hand. The top edge of the page
sits right under the toolbar, so its dominant color is what the frame
should blend into.
"""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import create_color


def _load_pixels(image_path, strip_height=None):
    img = Image.open(image_path).convert("RGB")
    if strip_height:
        strip_height = max(1, min(strip_height, img.height))
        img = img.crop((0, 0, img.width, strip_height))
    return np.array(img).reshape(-1, 3)


def sample_page_color(image_path, strip_height=8, n_colors=3):
    """Return the dominant color of the top strip of a page screenshot.

    Args:
        image_path: Path (or file object) of the screenshot
        strip_height: Height in pixels of the strip to analyse
        n_colors: Number of clusters to split the strip into

    Returns:
        Color of the most populated cluster
    """
    pixels = _load_pixels(image_path, strip_height)

    # KMeans needs at least n_colors distinct points
    values, counts = np.unique(pixels, axis=0, return_counts=True)
    if len(values) <= n_colors:
        r, g, b = values[counts.argmax()]
        return create_color(int(r), int(g), int(b))

    kmeans = KMeans(n_clusters=n_colors, random_state=42, n_init=10)
    labels = kmeans.fit_predict(pixels)
    dominant = np.bincount(labels).argmax()
    center = kmeans.cluster_centers_[dominant]
    return create_color(int(center[0]), int(center[1]), int(center[2]))


def average_color(image_path):
    """Get overall average color of image"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((100, 100))
    pixels = np.array(img).reshape(-1, 3)
    avg = pixels.mean(axis=0)
    return create_color(int(avg[0]), int(avg[1]), int(avg[2]))
