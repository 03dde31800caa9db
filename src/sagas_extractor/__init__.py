"""
sagas_extractor
===============

Decoder for the indexed bitmap format used by the DBZ Sagas asset pipeline.

Basic Usage:
------------
```python
import sagas_extractor as sagas

# decode and save
sagas.extract_image("title.bin", "title.png")

# inspect
sf = sagas.open_sagas_file("title.bin")
print(sf.header.width, sf.header.height)
rgba = sf.to_rgba()          # numpy (height, width, 4)
```

Command line:
-------------
    sagas-extractor -i title.bin -o out/title.png

Classes:
--------
- SagasHeader: parsed file header
- SagasColorLUT: 256-entry RGBA palette
- SagasFile: one decode session (header, palette, pixel plane)
- BinaryCursor: little-endian reader used by the decoders
"""

__version__ = "1.0.0"

from .binary_cursor import BinaryCursor
from .compositor import compose_rgba, read_pixel_plane
from .config import SagasExtractorConfig, create_config
from .errors import IndexOutOfRange, SagasDecodeError, SeekFailure, UnexpectedEof
from .palette import (
    PALETTE_BYTES,
    PALETTE_SIZE,
    SagasColor,
    SagasColorLUT,
    remap_alpha,
    remap_alpha_array,
    swizzle_palette,
)
from .sagas_core import (
    SagasFile,
    SagasHeader,
    SagasParser,
    decode_sagas,
    get_image_pil,
    get_image_rgba,
    parse_sagas,
)
from .api import extract_image, get_header_info, open_sagas_file, save_png

__all__ = [
    "BinaryCursor",
    "compose_rgba",
    "read_pixel_plane",
    "SagasExtractorConfig",
    "create_config",
    "SagasDecodeError",
    "UnexpectedEof",
    "SeekFailure",
    "IndexOutOfRange",
    "PALETTE_BYTES",
    "PALETTE_SIZE",
    "SagasColor",
    "SagasColorLUT",
    "remap_alpha",
    "remap_alpha_array",
    "swizzle_palette",
    "SagasFile",
    "SagasHeader",
    "SagasParser",
    "decode_sagas",
    "get_image_pil",
    "get_image_rgba",
    "parse_sagas",
    "extract_image",
    "get_header_info",
    "open_sagas_file",
    "save_png",
]
