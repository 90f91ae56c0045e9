#!/usr/bin/env python3
"""Check Zoom Server-to-Server OAuth credentials.

Loads the credentials file and requests an access token without creating
a meeting. Run it once after filling in ~/.zoom-meeting.config.json.

Usage:
    python scripts/check_credentials.py
    python scripts/check_credentials.py --config ./zoom.json
"""

import argparse
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from dotenv import load_dotenv

load_dotenv()


def main():
    parser = argparse.ArgumentParser(description="Check Zoom OAuth credentials")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Credentials file (default: ~/.zoom-meeting.config.json)",
    )
    args = parser.parse_args()

    # Import after path setup
    from zoom_meeting.auth import fetch_access_token
    from zoom_meeting.config import get_settings
    from zoom_meeting.credentials import default_config_path, load_credentials
    from zoom_meeting.exceptions import ConfigurationError, ZoomMeetingError

    settings = get_settings()
    config_path = args.config or settings.config_path

    print("=" * 60)
    print("Zoom Credentials Check")
    print("=" * 60)

    try:
        config_path = config_path or default_config_path()
        print(f"\nConfig file: {config_path}")
        credentials = load_credentials(config_path)
    except ConfigurationError as e:
        print(f"\nConfiguration Error: {e}")
        print("\nThe file must contain:")
        print('  {"account_id": "...", "client_id": "...", "client_secret": "..."}')
        sys.exit(1)

    print(f"Account ID: {credentials.account_id}")
    print("\nRequesting access token...")

    try:
        token = fetch_access_token(
            credentials,
            token_url=settings.token_url,
            timeout=settings.request_timeout,
        )
    except ZoomMeetingError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    print("\n" + "=" * 60)
    print("Credentials OK!")
    print("=" * 60)
    print(f"\nToken: {token[:10]}...")
    print("\nYou can now create meetings with:")
    print("  zoom-meeting")
    print("  python -m zoom_meeting.cli")


if __name__ == "__main__":
    main()
