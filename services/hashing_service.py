"""
HashingService: single-file digests with algorithm dispatch.

BLAKE3 and CRC32 stream the file in fixed-size chunks (1 KiB by default);
SHA-256 reads the whole file at once.
"""

from __future__ import annotations

import binascii
import hashlib
import logging
from typing import Callable, Dict, Iterator

import blake3

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024
AUTOV2_LENGTH = 10

SUPPORTED_ALGORITHMS = ("sha256", "blake3", "autov2", "crc32")

MISSING_ALGORITHM_MESSAGE = "Please input algorithm parameters"


class FileReadError(Exception):
    """Raised when the file to hash cannot be opened or read."""

    def __init__(self, file_path: str, error: OSError) -> None:
        self.file_path = file_path
        self.error = error
        super().__init__(f"Failed to read {file_path}: {error}")


class HashingService:
    """
    Computes file digests for the supported algorithms.

    - SHA-256, BLAKE3 and autov2 outputs are uppercase hex strings
    - CRC32 output is the byte-reversed big-endian value as lowercase hex
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be a positive integer, got {chunk_size}")
        self.chunk_size = chunk_size

    def digest(self, algorithm: str, file_path: str) -> str:
        """
        Dispatch to the hashing routine named by ``algorithm``.

        Args:
            algorithm (str): One of SUPPORTED_ALGORITHMS, empty, or anything else.
            file_path (str): Path of the file to hash.

        Returns:
            str: The encoded digest, the missing-algorithm prompt, or
                "<algorithm> is not supported". The file is only touched for
                supported algorithms.

        Raises:
            FileReadError: If the file cannot be opened or read.
        """
        if not algorithm:
            logger.debug("No algorithm given")
            return MISSING_ALGORITHM_MESSAGE

        handler = self._handlers().get(algorithm)
        if handler is None:
            logger.warning(f"Unsupported algorithm requested: {algorithm}")
            return f"{algorithm} is not supported"

        logger.debug(f"Calculating {algorithm} for {file_path} (chunk size {self.chunk_size})")
        result = handler(file_path)
        logger.info(f"{algorithm} of {file_path}: {result}")
        return result

    def calculate_sha256(self, file_path: str) -> str:
        return self._sha256_hexdigest(file_path).upper()

    def calculate_autov2(self, file_path: str) -> str:
        # Truncate the lowercase digest first, then uppercase the fingerprint.
        return self._sha256_hexdigest(file_path)[:AUTOV2_LENGTH].upper()

    def calculate_blake3(self, file_path: str) -> str:
        hasher = blake3.blake3()
        for data in self._read_chunks(file_path):
            hasher.update(data)
        return hasher.hexdigest().upper()

    def calculate_crc32(self, file_path: str) -> str:
        crc = 0
        for data in self._read_chunks(file_path):
            crc = binascii.crc32(data, crc)
        # Consumers expect the big-endian bytes reversed, in lowercase.
        return (crc & 0xFFFFFFFF).to_bytes(4, "big")[::-1].hex()

    def _handlers(self) -> Dict[str, Callable[[str], str]]:
        return {
            "sha256": self.calculate_sha256,
            "blake3": self.calculate_blake3,
            "autov2": self.calculate_autov2,
            "crc32": self.calculate_crc32,
        }

    def _sha256_hexdigest(self, file_path: str) -> str:
        try:
            with open(file_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise FileReadError(file_path, e) from e
        return hashlib.sha256(data).hexdigest()

    def _read_chunks(self, file_path: str) -> Iterator[bytes]:
        try:
            with open(file_path, "rb") as f:
                while True:
                    data = f.read(self.chunk_size)
                    if not data:
                        break
                    yield data
        except OSError as e:
            raise FileReadError(file_path, e) from e
