"""Test fixtures for devca_trust tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.x509.oid import NameOID

from devca_trust.lib.config import TrustStoreConfig
from devca_trust.lib.models import TrustAnchorStrategy

SAMPLE_SERIAL = 12345


@pytest.fixture(scope="session")
def root_key() -> RSAPrivateKey:
    """Generate RSA private key for test root CAs."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def make_root_pem(root_key: RSAPrivateKey) -> Callable[[int], bytes]:
    """Return a factory building a self-signed root CA PEM with a given serial."""

    def _make(serial_number: int) -> bytes:
        subject = x509.Name(
            [
                x509.NameAttribute(NameOID.ORGANIZATION_NAME, "mkcert development CA"),
                x509.NameAttribute(NameOID.COMMON_NAME, f"Test Root CA {serial_number}"),
            ]
        )
        not_before = datetime.now(UTC)
        cert = (
            x509.CertificateBuilder()
            .subject_name(subject)
            .issuer_name(subject)
            .public_key(root_key.public_key())
            .serial_number(serial_number)
            .not_valid_before(not_before)
            .not_valid_after(not_before + timedelta(days=30))
            .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
            .sign(root_key, hashes.SHA256())
        )
        return cert.public_bytes(serialization.Encoding.PEM)

    return _make


@pytest.fixture
def root_pem(make_root_pem: Callable[[int], bytes]) -> bytes:
    """Return root CA PEM with serial 12345."""
    return make_root_pem(SAMPLE_SERIAL)


@pytest.fixture
def root_cert_path(tmp_path: Path, root_pem: bytes) -> Path:
    """Write the root CA PEM to disk and return its path."""
    path = tmp_path / "rootCA.pem"
    path.write_bytes(root_pem)
    return path


@pytest.fixture
def sample_strategy() -> TrustAnchorStrategy:
    """Return a strategy writing to /a/%s.pem and refreshing with 'refresh'."""
    return TrustAnchorStrategy(
        anchor_dir="/a/",
        roots_pattern="/a/%s.pem",
        refresh_command=("refresh",),
    )


@pytest.fixture
def sample_config(sample_strategy: TrustAnchorStrategy) -> TrustStoreConfig:
    """Return config whose only candidate is sample_strategy."""
    return TrustStoreConfig(strategies=(sample_strategy,))


@pytest.fixture
def existing_paths() -> set[str]:
    """Return the set of paths the mock prober reports as existing."""
    return {"/a/"}


@pytest.fixture
def mock_prober(existing_paths: set[str]) -> MagicMock:
    """Return mocked PathProber answering from existing_paths."""
    prober = MagicMock()
    prober.exists.side_effect = lambda path: path in existing_paths
    return prober


@pytest.fixture
def mock_runner() -> MagicMock:
    """Return mocked CommandRunner where every command succeeds."""
    return MagicMock()
