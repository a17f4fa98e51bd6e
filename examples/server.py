# server.py

import uvicorn
from finantic.config import Settings
from finantic.server import create_app

settings = Settings.from_env()
app = create_app(settings)

if __name__ == "__main__":
    print("\n=== Finantic Waitlist Server ===")
    print(f"Endpoint: http://127.0.0.1:{settings.port}/api/waitlist")
    print(f"CSV file: {settings.csv_path}")
    if not settings.encryption_key:
        print("- FINANTIC_ENCRYPTION_KEY not set: rows will be unreadable after restart")
    print("- Auto-reload enabled - changes to this file will restart the server\n")

    uvicorn.run(
        "server:app",
        host="127.0.0.1",
        port=settings.port,
        reload=True,
        reload_dirs=["./"]
    )
