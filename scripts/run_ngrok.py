import ngrok
import asyncio
import os
from dotenv import load_dotenv

load_dotenv()

async def start_tunnel():
    # Use NGROK_AUTHTOKEN from .env if available
    authtoken = os.getenv("NGROK_AUTHTOKEN")
    port = int(os.getenv("PORT", "8080"))

    print("Starting ngrok tunnel...")
    try:
        listener = await ngrok.forward(port, authtoken=authtoken)
        print(f"\n[SUCCESS] Tunnel established!")
        print(f"Public URL: {listener.url()}")
        print(f"Telegram webhook URL: {listener.url()}/telegram")
        print(f"\nRegister it with: python scripts/set_webhook.py {listener.url()}")
        print("Keep this script running to maintain the tunnel.")

        # Keep alive
        while True:
            await asyncio.sleep(3600)
    except Exception as e:
        print(f"[ERROR] Failed to start ngrok: {e}")
        print("Make sure you have NGROK_AUTHTOKEN in your .env file.")
        print("Get one at: https://dashboard.ngrok.com/get-started/your-authtoken")

if __name__ == "__main__":
    asyncio.run(start_tunnel())
