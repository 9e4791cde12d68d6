"""Example showing session injection and caller-imposed timeouts."""

import asyncio

from aiohttp import ClientSession, ClientTimeout

from pynanopanel import NanoleafClient, NanoleafConnectionError, NanoleafHTTPStatusError


TOKEN = "your_token"


async def main() -> None:
    """Share one application-managed session between two devices."""
    # The library has no built-in timeout; set one on the session instead
    async with ClientSession(timeout=ClientTimeout(total=5)) as session:
        hallway = NanoleafClient("192.168.1.50", session=session)
        office = NanoleafClient("192.168.1.51", session=session)

        for name, client in (("hallway", hallway), ("office", office)):
            try:
                state = await client.get_state(TOKEN)
            except NanoleafHTTPStatusError as err:
                print(f"{name}: device refused request (HTTP {err.status})")
                continue
            except NanoleafConnectionError as err:
                print(f"{name}: unreachable ({err})")
                continue

            print(f"{name}: on={state.on.value} brightness={state.brightness.value}")

        # Session remains open until the application closes it
        print(f"\nSession closed: {session.closed}")


if __name__ == "__main__":
    asyncio.run(main())
