"""
Hashing Providers

Dispatch table from algorithm identifier to the library function that
computes the digest. No hash algorithm is implemented here; every entry
delegates to hashlib, zlib or a native extension package.
"""

import hashlib
import zlib
from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional

import google_crc32c
from farmhash import Fingerprint64
from siphash24 import siphash24

from hashbench.core.config import DEFAULT_SIPHASH_KEY
from hashbench.core.exceptions import HashProviderError
from .runner.config import HashAlgorithm

HashFunction = Callable[[bytes], Any]


def _sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _sha512(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


def _md5(data: bytes) -> bytes:
    return hashlib.md5(data).digest()


def _siphash24(key: bytes, data: bytes) -> bytes:
    return siphash24(data, key=key).digest()


def build_providers(siphash_key: Optional[bytes] = None) -> Dict[HashAlgorithm, HashFunction]:
    """
    Build the algorithm -> hash function table.

    Args:
        siphash_key: 16 byte key for SIPHASH24 (defaults to the reference key)

    Returns:
        Dictionary covering every HashAlgorithm member
    """
    if siphash_key is None:
        siphash_key = bytes.fromhex(DEFAULT_SIPHASH_KEY)

    return {
        HashAlgorithm.SHA1: _sha1,
        HashAlgorithm.SHA256: _sha256,
        HashAlgorithm.SHA512: _sha512,
        HashAlgorithm.MD5: _md5,
        HashAlgorithm.ADLER32: zlib.adler32,
        HashAlgorithm.CRC32: zlib.crc32,
        HashAlgorithm.CRC32C: google_crc32c.value,
        HashAlgorithm.FARMHASHFINGERPRINT64: Fingerprint64,
        HashAlgorithm.SIPHASH24: partial(_siphash24, siphash_key),
    }


def resolve_provider(algorithm: HashAlgorithm,
                     providers: Optional[Mapping[HashAlgorithm, HashFunction]] = None) -> HashFunction:
    """Return the hash function registered for an algorithm."""
    if providers is None:
        providers = build_providers()

    try:
        return providers[algorithm]
    except KeyError:
        raise HashProviderError(
            f"No hashing provider registered for {getattr(algorithm, 'name', algorithm)}",
            algorithm=getattr(algorithm, 'name', str(algorithm)),
        )
