# app/main.py
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from .config import get_settings
from .shelf import shelf_router
from .ui import index_page


get_settings()

app = FastAPI(
    title="Goodreads Random Book Picker",
    description=(
        "Read-only service that loads a reader's public Goodreads shelf "
        "and returns its books so the front-end can pick one at random."
    ),
    version="1.0.0",
)


# Every route is read-only
@app.middleware("http")
async def only_get(request: Request, call_next):
    if request.method != "GET":
        return PlainTextResponse("Method Not Allowed", status_code=405)
    return await call_next(request)


app.include_router(shelf_router)


# Registered last so it never shadows the API route
@app.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
def ui(path: str):
    return index_page()
