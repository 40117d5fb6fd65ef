"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sampler.py
Reads the bounded head/tail sample that stands in for a file's content.

Window policy (must stay bit-exact):
  size <= 1024           : every byte read from offset 0
  1024 < size <= 2048    : first 1024 bytes + up to 1024 bytes re-read from offset 0
  size > 2048            : first 1024 bytes + bytes [size - 1024, size)

The middle case overlaps the head window instead of reading the true tail.
Kept as-is so digests stay comparable with earlier reports.
"""

import os
import logging

from dupefinder.core.models import SamplingConfig
from dupefinder.core.interfaces import ContentSampler

logger = logging.getLogger(__name__)


class ContentSamplerImpl(ContentSampler):
    """
    Reads at most 2 * chunk_size bytes per file.
    I/O errors are not caught here: callers decide whether a file is skipped.
    """

    def __init__(self, chunk_size: int = SamplingConfig.CHUNK_SIZE):
        self.chunk_size = chunk_size

    def sample(self, path: str) -> bytes:
        with open(path, 'rb') as f:
            file_size = os.fstat(f.fileno()).st_size

            # May be shorter than chunk_size if the file shrank after traversal
            first_chunk = f.read(self.chunk_size)

            if file_size <= self.chunk_size:
                return first_chunk

            last_position = SamplingConfig.get_last_position(file_size, self.chunk_size)
            f.seek(last_position)
            last_chunk = f.read(self.chunk_size)

        logger.debug(f"Sampled {path}: {len(first_chunk)} + {len(last_chunk)} bytes "
                     f"(tail offset {last_position})")
        return first_chunk + last_chunk
