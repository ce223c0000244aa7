from __future__ import annotations
import enum
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .errors import (
    AlgorithmUnsupported,
    AllocationFailure,
    ArgumentRangeError,
    ProviderError,
    ProviderUnavailable,
)

logger = logging.getLogger(__name__)

MIN_HASH_TYPE = 1
MAX_HASH_TYPE = 5

MIN_ITERATION_COUNT = 1
MAX_ITERATION_COUNT = 5_000_000


class HashAlgorithm(enum.Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"


# Index is hashType - 1. Codes 4 and 5 both select SHA512; kept as observed.
_HASH_TYPE_TABLE = (
    HashAlgorithm.SHA1,
    HashAlgorithm.SHA256,
    HashAlgorithm.SHA384,
    HashAlgorithm.SHA512,
    HashAlgorithm.SHA512,
)


def hash_algorithm_from_code(code: int) -> HashAlgorithm:
    if code < MIN_HASH_TYPE:
        raise ArgumentRangeError("hashType", MIN_HASH_TYPE, "minimum")
    if code > MAX_HASH_TYPE:
        raise ArgumentRangeError("hashType", MAX_HASH_TYPE, "maximum")
    return _HASH_TYPE_TABLE[code - 1]


@dataclass(frozen=True)
class DerivationParameters:
    algorithm: HashAlgorithm
    salt: bytes
    iteration_count: int
    password: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.algorithm, HashAlgorithm):
            raise ValueError("Algorithm must be a HashAlgorithm.")
        if not isinstance(self.salt, (bytes, bytearray)):
            raise ValueError("Salt must be bytes.")
        if not isinstance(self.password, (bytes, bytearray)):
            raise ValueError("Password must be bytes.")
        if not MIN_ITERATION_COUNT <= self.iteration_count <= MAX_ITERATION_COUNT:
            raise ValueError(
                f"Iteration count must be between {MIN_ITERATION_COUNT} and {MAX_ITERATION_COUNT}."
            )


@dataclass(frozen=True)
class DerivationResult:
    derived_key: bytes
    elapsed_seconds: float


@dataclass
class AlgorithmHandle:
    name: str
    algorithm: hashes.HashAlgorithm
    closed: bool = False


class CryptographyProvider:
    """
    Key-derivation provider with an open / query / derive / close lifecycle,
    backed by the `cryptography` package.
    """

    _FACTORIES = {
        "SHA1": hashes.SHA1,
        "SHA256": hashes.SHA256,
        "SHA384": hashes.SHA384,
        "SHA512": hashes.SHA512,
    }

    def open_algorithm(self, name: str) -> AlgorithmHandle:
        factory = self._FACTORIES.get(name)
        if factory is None:
            raise ProviderUnavailable("NOT_FOUND", "open_algorithm")
        return AlgorithmHandle(name=name, algorithm=factory())

    def native_digest_size(self, handle: AlgorithmHandle) -> int:
        self._check_open(handle, "native_digest_size")
        return handle.algorithm.digest_size

    def derive_pbkdf2(
        self,
        handle: AlgorithmHandle,
        password: bytes,
        salt: bytes,
        iterations: int,
        length: int,
    ) -> bytes:
        self._check_open(handle, "derive_pbkdf2")
        try:
            kdf = PBKDF2HMAC(
                algorithm=handle.algorithm,
                length=length,
                salt=bytes(salt),
                iterations=iterations,
            )
            return kdf.derive(bytes(password))
        except UnsupportedAlgorithm as e:
            raise AlgorithmUnsupported("UNSUPPORTED_ALGORITHM", "derive_pbkdf2") from e
        except MemoryError as e:
            raise AllocationFailure(length, "hash value") from e
        except (TypeError, ValueError) as e:
            raise ProviderError("INVALID_PARAMETER", "derive_pbkdf2") from e

    def close_algorithm(self, handle: AlgorithmHandle) -> None:
        handle.closed = True

    @contextmanager
    def opened(self, name: str) -> Iterator[AlgorithmHandle]:
        handle = self.open_algorithm(name)
        try:
            yield handle
        finally:
            self.close_algorithm(handle)

    @staticmethod
    def _check_open(handle: AlgorithmHandle, operation: str) -> None:
        if handle.closed:
            raise ProviderError("INVALID_HANDLE", operation)


def derive_key(params: DerivationParameters, provider: CryptographyProvider | None = None) -> bytes:
    """
    Run PBKDF2 with the parameters as given. The key length is the native
    digest size of the chosen hash; callers never pick it.
    """
    provider = provider or CryptographyProvider()

    with provider.opened(params.algorithm.value) as handle:
        key_len = provider.native_digest_size(handle)
        logger.debug(
            "PBKDF2-HMAC-%s: salt=%d bytes, password=%d bytes, iterations=%d, key=%d bytes",
            params.algorithm.value,
            len(params.salt),
            len(params.password),
            params.iteration_count,
            key_len,
        )
        return provider.derive_pbkdf2(
            handle,
            password=params.password,
            salt=params.salt,
            iterations=params.iteration_count,
            length=key_len,
        )
