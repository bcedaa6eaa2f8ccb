from .backends import Rasterizer, InkscapeRasterizer, ImageMagickRasterizer, RsvgRasterizer
from .invoker import RasterizerInvoker
from .locator import RasterizerLocator
