from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import settings

app = FastAPI(title="Hello Server", version="1.0.0")


@app.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def greet() -> str:
    return settings.greeting
