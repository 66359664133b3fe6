"""
Benchmark Configuration

Algorithm identifiers and the immutable description of one benchmark
invocation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from hashbench.core.exceptions import UsageError

# Encoding applied to the phrase before it is handed to the hashing provider.
PHRASE_ENCODING = "utf-8"


class HashAlgorithm(str, Enum):
    """Supported hash and checksum functions."""
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"
    MD5 = "MD5"
    ADLER32 = "ADLER32"
    CRC32 = "CRC32"
    CRC32C = "CRC32C"
    FARMHASHFINGERPRINT64 = "FARMHASHFINGERPRINT64"
    SIPHASH24 = "SIPHASH24"

    @classmethod
    def names(cls) -> List[str]:
        return [member.name for member in cls]

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """Look up an algorithm by its canonical (case-sensitive) name."""
        try:
            return cls[name]
        except KeyError:
            raise UsageError(
                f"Unsupported algorithm: {name}",
                field_name="algorithm",
                invalid_value=name,
            )


@dataclass(frozen=True)
class BenchmarkInvocation:
    """One benchmark request: which algorithm, how many runs, what to hash."""
    algorithm: HashAlgorithm
    run_count: int
    phrase: str

    def __post_init__(self):
        if not isinstance(self.algorithm, HashAlgorithm):
            raise UsageError(
                f"Unsupported algorithm: {self.algorithm}",
                field_name="algorithm",
                invalid_value=self.algorithm,
            )
        validate_run_count(self.run_count)
        encode_phrase(self.phrase)


def validate_run_count(run_count: int) -> int:
    """Reject run counts below one before any timing work starts."""
    if isinstance(run_count, bool) or not isinstance(run_count, int) or run_count < 1:
        raise UsageError(
            f"Run count must be a positive integer, got {run_count!r}",
            field_name="run_count",
            invalid_value=run_count,
        )
    return run_count


def encode_phrase(phrase: str) -> bytes:
    """Encode the phrase for hashing; text that has no UTF-8 form is a usage error."""
    try:
        return phrase.encode(PHRASE_ENCODING)
    except UnicodeEncodeError as e:
        raise UsageError(
            f"Phrase cannot be encoded as {PHRASE_ENCODING}: {e.reason}",
            field_name="phrase",
            invalid_value=phrase,
        )
