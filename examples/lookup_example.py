"""
Example: one lookup per provider through LookupClient.

Credentials are read from the environment (or a .env file). Providers without
credentials answer with a ``missing_credentials`` envelope instead of failing.
"""

import asyncio
import json

from dotenv import load_dotenv

from person_lookup_sdk import LookupClient


async def main():
    load_dotenv()

    async with LookupClient() as client:
        print("Configured providers:", client.get_provider_status())

        lookups = [
            ("enformion", {"firstName": "Jane", "lastName": "Doe", "phone": "(555) 123-4567"}, None),
            ("peopledatalabs", {"email": "jane.doe@example.com"}, None),
            ("trestle", {"endpoint": "phone_intel", "phone": "5551234567"}, None),
            ("twilio", {"phone": "5551234567"}, None),
            ("twilio", {}, {"phone": "5551234567", "action": "identity", "given_name": "Jane"}),
        ]

        for provider, params, body in lookups:
            result = await client.lookup(provider, params, body=body)
            print(f"\n=== {provider} ===")
            print(json.dumps(result.to_payload(), indent=2)[:800])


if __name__ == "__main__":
    asyncio.run(main())
