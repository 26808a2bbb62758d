from PIL import Image
import numpy as np
from tqdm import tqdm

from MunsellSpectrum.Converter import MunsellConverter
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Palette import Palette
from MunsellSpectrum.Utils.CustomTypes import RGB


def LoadImage(image: str | Image.Image) -> Image.Image:
    """Open an image path (or take an already open image) as 8-bit RGB."""
    if isinstance(image, str):
        image = Image.open(image)
    return image.convert("RGB")


def SampleImageColor(image: str | Image.Image, x: int, y: int, converter: MunsellConverter) -> MunsellColor:
    """
    The Munsell color of a single pixel.

    Args:
        image (str or Image.Image): image path or Pillow image
        x (int): column of the pixel
        y (int): row of the pixel
        converter (MunsellConverter): converter used for the RGB -> Munsell lookup

    Returns:
        MunsellColor: the closest tabulated color to the pixel
    """
    image = LoadImage(image)
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise ValueError(f"Pixel ({x}, {y}) is outside the {image.width}x{image.height} image")
    r, g, b = image.getpixel((x, y))
    return MunsellColor.from_rgb(RGB(r, g, b), converter)


def PosterizeImage(image: str | Image.Image, palette: Palette, converter: MunsellConverter,
                   verbose: bool = False) -> Image.Image:
    """
    Repaint every pixel with the closest color of the palette.

    Each pixel is looked up as a Munsell color, matched against the palette
    (see Palette.get_closest_color) and painted with that palette color's RGB.
    Identical pixels are only matched once.

    Args:
        image (str or Image.Image): image path or Pillow image
        palette (Palette): colors to paint with
        converter (MunsellConverter): converter for the pixel lookups and the palette projection
        verbose (bool, optional): show a progress bar. Defaults to False.

    Returns:
        Image.Image: a new RGB image the same size as the input

    Raises:
        ValueError: the palette is empty
    """
    if len(palette) == 0:
        raise ValueError("The palette is empty, add colors before posterizing")

    pixels = np.asarray(LoadImage(image))
    unique, inverse = np.unique(pixels.reshape(-1, 3), axis=0, return_inverse=True)

    painted = np.zeros_like(unique)
    for i, channels in enumerate(tqdm(unique, desc="Posterizing", disable=not verbose)):
        color = MunsellColor.from_rgb(RGB(*channels.tolist()), converter)
        closest = palette.get_closest_color(color, converter)
        painted[i] = closest.to_rgb(converter).to_array()

    return Image.fromarray(painted[inverse.reshape(-1)].reshape(pixels.shape).astype(np.uint8))
