"""ASGI entry point: uvicorn radarchart.main:app

Configuration comes from RADARCHART_* environment variables only.
"""

import uvicorn
from radarchart.main_web import build_server
from radarchart.settings import get_settings

settings = get_settings()
settings.validate()

server = build_server(settings)
app = server.app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)
