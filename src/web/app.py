"""
FastAPI web interface for City Path Finder.

A single form (start, end, algorithm) plus a JSON API.
"""

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from src import config
from src.geo import CityMap
from src.pathfinding import available_algorithms
from src.pathfinding.strategy import DISPLAY_NAMES
from src.query import CityPathFinder, QueryResult, build_graph

# Paths
BASE_DIR = Path(__file__).parent
TEMPLATES_DIR = BASE_DIR / "templates"

# Initialize FastAPI
app = FastAPI(
    title="City Path Finder",
    description="Shortest distance between two cities",
    version="0.1.0",
)

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Global instance (loaded on startup)
path_finder: CityPathFinder | None = None
map_name = "sample"


def load_path_finder() -> CityPathFinder:
    """Load the city map from the data directory, or fall back to the sample graph."""
    global map_name

    if config.ROADS_FILE.exists():
        print(f"Loading city map from {config.ROADS_FILE}")
        city_map = CityMap.from_files(
            config.ROADS_FILE,
            config.CITIES_FILE if config.CITIES_FILE.exists() else None,
        )
        if city_map.rows_skipped:
            print(f"Skipped {city_map.rows_skipped} invalid map rows")
        map_name = config.ROADS_FILE.stem
        return CityPathFinder.from_city_map(city_map)

    print(f"No city map found at {config.ROADS_FILE}, using the sample graph")
    map_name = "sample"
    return CityPathFinder(build_graph())


@app.on_event("startup")
async def startup_event():
    """Load the graph on startup."""
    global path_finder
    path_finder = load_path_finder()


def get_path_finder() -> CityPathFinder:
    global path_finder
    if path_finder is None:
        path_finder = load_path_finder()
    return path_finder


class QueryRequest(BaseModel):
    """Request model for API."""

    start: str
    end: str
    algorithm: str = config.DEFAULT_ALGORITHM


class QueryResponse(BaseModel):
    """Response model for API."""

    status: str
    found: bool
    algorithm: str
    start: str | None = None
    end: str | None = None
    distance: int | float  # -1 when there is no path
    path: list[str] = []
    message: str = ""
    suggestions: list[str] = []


class AlgorithmInfo(BaseModel):
    name: str
    label: str


def to_response(result: QueryResult) -> QueryResponse:
    return QueryResponse(
        status=result.status.value,
        found=result.found,
        algorithm=result.algorithm,
        start=None if result.source is None else str(result.source),
        end=None if result.destination is None else str(result.destination),
        distance=result.display_distance,
        path=[str(node) for node in result.path],
        message=result.message,
        suggestions=result.suggestions,
    )


def algorithm_choices() -> list[AlgorithmInfo]:
    return [
        AlgorithmInfo(name=name, label=DISPLAY_NAMES.get(name, name))
        for name in available_algorithms()
    ]


def page_context(**extra) -> dict:
    finder = get_path_finder()
    return {
        "algorithms": algorithm_choices(),
        "places": sorted(str(node) for node in finder.graph.nodes()),
        "selected_algorithm": config.DEFAULT_ALGORITHM,
        **extra,
    }


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render main page."""
    return templates.TemplateResponse(request, "index.html", page_context())


@app.post("/", response_class=HTMLResponse)
async def process_form(
    request: Request,
    start: str = Form(""),
    end: str = Form(""),
    algorithm: str = Form(config.DEFAULT_ALGORITHM),
):
    """Process form submission and return results."""
    result = get_path_finder().run_query(algorithm, start, end)
    return templates.TemplateResponse(
        request,
        "index.html",
        page_context(
            start=start,
            end=end,
            selected_algorithm=algorithm,
            result=to_response(result),
        ),
    )


@app.get("/api/algorithms", response_model=list[AlgorithmInfo])
async def api_algorithms() -> list[AlgorithmInfo]:
    """List the available search algorithms."""
    return algorithm_choices()


@app.post("/api/query", response_model=QueryResponse)
async def api_query(query: QueryRequest) -> QueryResponse:
    """API endpoint for programmatic access."""
    return to_response(get_path_finder().run_query(query.algorithm, query.start, query.end))


@app.get("/health")
async def health():
    """Health check endpoint."""
    finder = get_path_finder()
    return {
        "status": "ok",
        "map": map_name,
        "nodes": len(finder.graph),
        "edges": finder.graph.number_of_edges(),
    }
