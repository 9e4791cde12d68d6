"""Basic usage example for pynanopanel library."""

import asyncio

from pynanopanel import NanoleafClient
from pynanopanel.models import BrightnessSetWithDuration, On, RangeSet


async def main() -> None:
    """Demonstrate pairing and basic control."""
    async with NanoleafClient("192.168.1.50") as client:
        # Hold the controller's power button for 5-7 seconds before this call
        auth = await client.add_user()
        token = auth.token
        print(f"Issued token: {token}")

        info = await client.get_all_info(token)
        print(f"\nDevice: {info.name}")
        print(f"  Model: {info.model}")
        print(f"  Firmware: {info.firmware_version}")
        print(f"  Serial: {info.serial_number}")
        print(f"  Panels: {info.panel_layout.layout.num_panels}")
        print(f"  On: {info.state.on.value}")

        print("\nTurning panels on...")
        await client.set_on(token, On(value=True))

        print("Fading to 60% brightness over 5 seconds...")
        await client.set_brightness(token, BrightnessSetWithDuration(value=60, duration=5))

        print("Setting hue to blue...")
        await client.set_hue(token, RangeSet(value=240))

        effects = await client.get_all_effects(token)
        print(f"\nStored effects: {', '.join(effects)}")
        if effects:
            await client.set_effect(token, effects[0])
            print(f"Selected: {await client.get_effect(token)}")


if __name__ == "__main__":
    asyncio.run(main())
