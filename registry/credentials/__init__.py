from registry.credentials.interfaces import CredentialOracle, CredentialOracleUnavailableError
from registry.credentials.static_oracle import StaticCredentialOracle

__all__ = [
    "CredentialOracle",
    "CredentialOracleUnavailableError",
    "StaticCredentialOracle",
]
