"""
The chunk types registered in the PNG 1.2 specification.
"""
from types import MappingProxyType

from pngchunktype.models import ChunkType


# Critical chunks
IMAGE_HEADER = ChunkType.from_bytes(b'IHDR')
PALETTE = ChunkType.from_bytes(b'PLTE')
IMAGE_DATA = ChunkType.from_bytes(b'IDAT')
IMAGE_TRAILER = ChunkType.from_bytes(b'IEND')

# Ancillary chunks
PRIMARY_CHROMATICITIES = ChunkType.from_bytes(b'cHRM')
IMAGE_GAMMA = ChunkType.from_bytes(b'gAMA')
EMBEDDED_ICC_PROFILE = ChunkType.from_bytes(b'iCCP')
SIGNIFICANT_BITS = ChunkType.from_bytes(b'sBIT')
STANDARD_RGB_COLOR_SPACE = ChunkType.from_bytes(b'sRGB')
BACKGROUND_COLOR = ChunkType.from_bytes(b'bKGD')
PALETTE_HISTOGRAM = ChunkType.from_bytes(b'hIST')
TRANSPARENCY = ChunkType.from_bytes(b'tRNS')
PHYSICAL_PIXEL_DIMENSIONS = ChunkType.from_bytes(b'pHYs')
SUGGESTED_PALETTE = ChunkType.from_bytes(b'sPLT')
IMAGE_LAST_MODIFICATION_TIME = ChunkType.from_bytes(b'tIME')
INTERNATIONAL_TEXTUAL_DATA = ChunkType.from_bytes(b'iTXt')
TEXTUAL_DATA = ChunkType.from_bytes(b'tEXt')
COMPRESSED_TEXTUAL_DATA = ChunkType.from_bytes(b'zTXt')


CHUNK_TYPE_NAMES = MappingProxyType({
    IMAGE_HEADER: 'image header',
    PALETTE: 'palette',
    IMAGE_DATA: 'image data',
    IMAGE_TRAILER: 'image trailer',
    PRIMARY_CHROMATICITIES: 'primary chromaticities',
    IMAGE_GAMMA: 'image gamma',
    EMBEDDED_ICC_PROFILE: 'embedded ICC profile',
    SIGNIFICANT_BITS: 'significant bits',
    STANDARD_RGB_COLOR_SPACE: 'standard RGB color space',
    BACKGROUND_COLOR: 'background color',
    PALETTE_HISTOGRAM: 'palette histogram',
    TRANSPARENCY: 'transparency',
    PHYSICAL_PIXEL_DIMENSIONS: 'physical pixel dimensions',
    SUGGESTED_PALETTE: 'suggested palette',
    IMAGE_LAST_MODIFICATION_TIME: 'image last-modification time',
    INTERNATIONAL_TEXTUAL_DATA: 'international textual data',
    TEXTUAL_DATA: 'textual data',
    COMPRESSED_TEXTUAL_DATA: 'compressed textual data',
})

CODE_TO_CHUNK_TYPE = MappingProxyType(
    {chunk_type.code: chunk_type for chunk_type in CHUNK_TYPE_NAMES})

# Registered chunks never break the naming rules
assert all(t.is_public() and t.is_valid() for t in CHUNK_TYPE_NAMES)


def lookup(code):
    """
    Return the registered :class:`models.ChunkType` for ``code``, or
    ``None`` if the code is not registered.

    :type code: bytes
    """
    return CODE_TO_CHUNK_TYPE.get(code)
