from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from .config import Settings
from .errors import SurfaceNotFound, TargetSurfaceReadOnly
from .formatter import Formatter
from .logging_setup import setup_logging
from .lookup import SummaryLookup
from .models import LookupOutcome, SurfaceIn, SurfaceOut
from .surfaces import Surface, SurfaceRegistry
from .util import word_at_point
from .wikipedia_service import LANGUAGE_PATTERN, WikipediaService

settings = Settings.from_env()
setup_logging(settings.log_level)

app = FastAPI(title="Wikipedia Summary", version="0.1.0")

# Initialize components (will be created in lifespan)
wiki = None
registry = None
summaries = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global wiki, registry, summaries
    wiki = WikipediaService(user_agent=settings.user_agent, timeout=settings.timeout)
    registry = SurfaceRegistry()
    summaries = SummaryLookup(settings, wiki, registry, Formatter(settings.fill_column))
    yield


app.router.lifespan_context = lifespan


@app.exception_handler(TargetSurfaceReadOnly)
async def read_only_handler(request, exc: TargetSurfaceReadOnly):
    return JSONResponse(status_code=409, content={"error": str(exc)})


@app.exception_handler(SurfaceNotFound)
async def not_found_handler(request, exc: SurfaceNotFound):
    return JSONResponse(status_code=404, content={"error": str(exc)})


def _surface_out(surface: Surface) -> SurfaceOut:
    return SurfaceOut(
        name=surface.name,
        text=surface.text,
        point=surface.point,
        read_only=surface.read_only,
        displayed=registry.displayed == surface.name,
    )


@app.get("/")
def root():
    return {"message": "Wikipedia summary service is running, see /docs for the API"}


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "wikisummary"}


@app.get("/lookup", response_model=LookupOutcome)
async def lookup(
    title: Optional[str] = Query(None, description="Article title, e.g. Haskell (programming language)"),
    into: Optional[str] = Query(None, description="Insert into this surface instead of a new one"),
    lang: Optional[str] = Query(None, pattern=LANGUAGE_PATTERN, description="Wikipedia language code"),
):
    """
    Look up a summary. Without a title, the word at the point of the
    `into` surface is used.
    """
    if not title and into:
        target = registry.get(into)
        title = word_at_point(target.text, target.point)
    if not title:
        raise HTTPException(status_code=422, detail="A title is required")

    return await summaries.lookup(title, into=into, language=lang)


@app.post("/surfaces", response_model=SurfaceOut, status_code=201)
async def create_surface(body: SurfaceIn):
    point = len(body.text) if body.point is None else body.point
    try:
        surface = registry.add(
            Surface(name=body.name, text=body.text, point=point, read_only=body.read_only)
        )
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _surface_out(surface)


@app.get("/surfaces")
async def list_surfaces():
    return {"surfaces": registry.names(), "displayed": registry.displayed}


@app.get("/surfaces/{name}", response_model=SurfaceOut)
async def get_surface(name: str):
    return _surface_out(registry.get(name))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("wikisummary.main:app", host="0.0.0.0", port=settings.port)
