"""
Pydantic models for data owned by remote services.
"""
from authservice.models.credential import OperationOutcome, StoredCredential

__all__ = [
    "OperationOutcome",
    "StoredCredential",
]
