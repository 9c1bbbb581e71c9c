"""Certificate utility functions for reading root certificates and naming their trust files."""

from pathlib import Path

from cryptography import x509

from .errors import CertificateParseError, CertificateReadError
from .models import CertificateIdentity, TrustAnchorStrategy

DEFAULT_NAME_LABEL = "mkcert development CA "


def read_certificate_bytes(path: Path) -> bytes:
    """Read raw PEM bytes from path.

    Raises:
        CertificateReadError: If the file cannot be read
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise CertificateReadError(f"failed to read root certificate: {e}") from e


def deserialize_certificate(pem_data: bytes) -> x509.Certificate:
    """Deserialize certificate from PEM bytes.

    Raises:
        CertificateParseError: If pem_data is empty or not a PEM X.509 certificate
    """
    if not pem_data.strip():
        raise CertificateParseError("failed to parse root certificate: empty input")
    try:
        return x509.load_pem_x509_certificate(pem_data)
    except ValueError as e:
        raise CertificateParseError(f"failed to parse root certificate: {e}") from e


def derive_identity(pem_data: bytes) -> CertificateIdentity:
    """Extract the serial number of a PEM certificate as decimal text."""
    cert = deserialize_certificate(pem_data)
    return CertificateIdentity(serial_number=str(cert.serial_number))


def canonical_file_name(
    identity: CertificateIdentity, label: str = DEFAULT_NAME_LABEL
) -> str:
    """Build the trust file name for a certificate, e.g. mkcert_development_CA_12345.

    Serial numbers are decimal digits, so distinct serials give distinct names.
    """
    return (label + identity.serial_number).replace(" ", "_")


def certificate_path(
    strategy: TrustAnchorStrategy,
    identity: CertificateIdentity,
    label: str = DEFAULT_NAME_LABEL,
) -> str:
    """Return where the certificate lives under strategy's layout."""
    return strategy.path_for(canonical_file_name(identity, label))
