import argparse
import secrets
import sys

import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

from oauth2_client.core.exceptions import OAuth2Error
from oauth2_client.logging_config import setup_global_logging
from oauth2_client.oauth.config import OAuth2Config

# Load environment variables from .env file
load_dotenv()


def main():
    parser = argparse.ArgumentParser(
        description="Walk through the OAuth2 authorization code flow."
    )
    parser.add_argument(
        "--code",
        help="Authorization code from the callback; prompted for when omitted.",
    )
    parser.add_argument(
        "--state",
        help="State value to send; a random one is generated when omitted.",
    )
    parser.add_argument(
        "--api-url",
        help="Optional API URL to call with the issued token.",
    )
    args = parser.parse_args()

    setup_global_logging()

    try:
        config = OAuth2Config.from_env()
    except ValidationError as e:
        print("Error: Ensure OAUTH2_CLIENT_ID, OAUTH2_CLIENT_SECRET, OAUTH2_AUTH_URL "
              "and OAUTH2_TOKEN_URL are in your .env file.")
        print(e)
        sys.exit(1)

    state = args.state or secrets.token_urlsafe(16)
    print(f"Open this URL in your browser:\n\n  {config.authorize_url(state)}\n")
    print(f"Expect state={state} on the callback.")

    code = args.code or input("Paste the authorization code: ").strip()

    try:
        token = config.exchange(code)
    except OAuth2Error as e:
        print(f"Token exchange failed: {e}")
        sys.exit(1)

    print(f"Got {token.token_type or 'untyped'} token with scopes: {', '.join(token.scopes) or '(none)'}")

    if args.api_url:
        with httpx.Client(auth=config.authorization(token)) as client:
            response = client.get(args.api_url)
        print(f"{args.api_url} -> {response.status_code}")
        print(response.text)


if __name__ == "__main__":
    main()
