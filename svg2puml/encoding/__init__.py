from .raster_reader import read_bitmap
from .sprite_encoder import SpriteEncoder
