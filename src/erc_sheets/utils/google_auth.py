import os
import logging
from typing import Optional, Union

from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials

logger = logging.getLogger(__name__)

AnyCredentials = Union[Credentials, service_account.Credentials]


class GoogleAuthManager:
    """Loads Google credentials once and shares them between services."""

    # Combined scopes for all Google services
    SCOPES = [
        'https://www.googleapis.com/auth/drive.file',
        'https://www.googleapis.com/auth/spreadsheets'
    ]

    _instance = None
    _credentials = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(GoogleAuthManager, cls).__new__(cls)
        return cls._instance

    def get_credentials(self) -> AnyCredentials:
        """Get valid credentials, loading or refreshing them as needed."""
        if self._credentials and self._credentials.valid:
            return self._credentials

        self._credentials = self._load_or_refresh_credentials()
        return self._credentials

    def reset(self) -> None:
        """Forget cached credentials so the next call reloads them."""
        self._credentials = None

    def _load_or_refresh_credentials(self) -> AnyCredentials:
        creds = self._credentials or self._load_credentials()

        # Refreshed tokens live in memory only
        if not creds.valid:
            if isinstance(creds, Credentials) and not creds.refresh_token:
                raise ValueError("Stored user token has expired and has no refresh token")
            logger.info("[GoogleAuthManager] Refreshing credentials")
            creds.refresh(Request())
        return creds

    def _load_credentials(self) -> AnyCredentials:
        service_account_file = os.getenv('GOOGLE_APPLICATION_CREDENTIALS')
        if service_account_file:
            logger.info(f"[GoogleAuthManager] Using service account key: {service_account_file}")
            return service_account.Credentials.from_service_account_file(
                service_account_file, scopes=self.SCOPES)

        token_file = os.getenv('GOOGLE_TOKEN_FILE', 'token.json')
        if not os.path.exists(token_file):
            raise ValueError(
                f"No credentials found: set GOOGLE_APPLICATION_CREDENTIALS or provide {token_file}"
            )
        logger.info(f"[GoogleAuthManager] Using authorized user token: {token_file}")
        return Credentials.from_authorized_user_file(token_file, self.SCOPES)


def load_credentials(manager: Optional[GoogleAuthManager] = None) -> AnyCredentials:
    """Shortcut for GoogleAuthManager().get_credentials()."""
    return (manager or GoogleAuthManager()).get_credentials()
