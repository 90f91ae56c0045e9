"""Loading of the Zoom Server-to-Server OAuth credentials file."""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".zoom-meeting.config.json"


class Credentials(BaseModel):
    """Account and app credentials of a Server-to-Server OAuth app."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    account_id: str
    client_id: str
    client_secret: str

    @field_validator("account_id", "client_id", "client_secret")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


def default_config_path() -> Path:
    """Return the credentials file location in the user's home directory.

    Raises:
        ConfigurationError: If the home directory cannot be resolved.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigurationError(f"Error finding user home directory: {e}", cause=e)
    return home / CONFIG_FILENAME


def load_credentials(path: Path | None = None) -> Credentials:
    """Read and validate the credentials file.

    Args:
        path: Explicit file location. Defaults to ``default_config_path()``.

    Returns:
        The complete set of credentials.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON, or
            any of account_id, client_id and client_secret is missing or empty.
    """
    if path is None:
        config_file = default_config_path()
    else:
        try:
            config_file = Path(path).expanduser()
        except RuntimeError as e:
            raise ConfigurationError(f"Error finding user home directory: {e}", cause=e)
    logger.debug(f"Loading credentials from {config_file}")

    try:
        content = config_file.read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {config_file}: {e}", cause=e)

    try:
        content = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Error parsing config file {config_file}: {e}", cause=e)

    try:
        credentials = Credentials.model_validate_json(content)
    except ValidationError as e:
        # Only absent or blank fields count as missing; anything else is a bad file
        if any(err["type"] not in ("missing", "value_error") for err in e.errors()):
            raise ConfigurationError(f"Error parsing config file {config_file}", cause=e)
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ConfigurationError(
            "Account ID or Client ID or Client Secret not found in config file "
            f"({', '.join(missing)})",
            cause=e,
        )

    logger.info(f"Loaded credentials for account {credentials.account_id}")
    return credentials
