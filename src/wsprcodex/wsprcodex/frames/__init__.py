"""WSPR Chunk Frame Definitions

This module contains the framing used to spread one payload over
several WSPR messages:
- Encoding modes (Basic, Extended)
- Chunks and their 6-byte frames
- Chunk sets (split, validate, reassemble)
"""

from wsprcodex.frames.chunk import Chunk, ChunkSet, EncodingMode

__all__ = [
    "EncodingMode",
    "Chunk",
    "ChunkSet",
]
