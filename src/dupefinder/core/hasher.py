"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Computes content keys from sampled bytes using pluggable hash algorithms.

HasherImpl combines a ContentSampler with a HashAlgorithm. The resulting
ContentKey pairs the digest with the traversal size of the file.
"""

import xxhash
from dupefinder.core.models import FileRecord, ContentKey
from dupefinder.core.interfaces import Hasher, HashAlgorithm, ContentSampler
from dupefinder.core.sampler import ContentSamplerImpl


# Use the same way to implement and use any other hashing algorithm
class XXHash128AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh128(data).digest()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Sampling errors (OSError) propagate to the caller.
    """

    def __init__(self, algorithm: HashAlgorithm = None, sampler: ContentSampler = None):
        self.algorithm = algorithm or XXHash128AlgorithmImpl()
        self.sampler = sampler or ContentSamplerImpl()

    def compute_sample_hash(self, path: str) -> bytes:
        """Digest of the head/tail sample of a file."""
        return self.algorithm.hash(self.sampler.sample(path))

    def compute_content_key(self, record: FileRecord) -> ContentKey:
        return ContentKey(digest=self.compute_sample_hash(record.path), size=record.size)
