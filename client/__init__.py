"""
Contact Book client.

Python counterpart of the browser client: credential storage, an HTTP
wrapper that attaches the bearer token and handles session expiry, and
typed-result services for auth and contacts.

Public API:
- ApiClient: HTTP wrapper
- AuthClient, ContactsClient: Operations returning Ok/Failure results
- CredentialStore, FileCredentialStore, MemoryCredentialStore: Session storage
- SubmissionGuard: Single-flight form submission
"""

from .auth import AuthClient
from .contacts import Contact, ContactsClient
from .credentials import (
    CredentialStore,
    Credentials,
    FileCredentialStore,
    MemoryCredentialStore,
    UserProfile,
)
from .forms import SubmissionGuard
from .http import ApiClient
from .results import ErrorKind, Failure, Ok, Result

__all__ = [
    "ApiClient",
    "AuthClient",
    "ContactsClient",
    "Contact",
    "CredentialStore",
    "Credentials",
    "FileCredentialStore",
    "MemoryCredentialStore",
    "UserProfile",
    "SubmissionGuard",
    "ErrorKind",
    "Failure",
    "Ok",
    "Result",
]
