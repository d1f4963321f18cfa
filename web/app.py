from __future__ import annotations

import os

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from api import app as api_app
from complexity.highlight import DEFAULT_LANGUAGE, highlight_markup, stylesheet

WEB_DIR = os.path.dirname(os.path.abspath(__file__))

SAMPLE_CODE = """void bubbleSort(int arr[], int n) {
  for (int i = 0; i < n - 1; i++) {
    for (int j = 0; j < n - i - 1; j++) {
      if (arr[j] > arr[j + 1]) {
        // Swap arr[j] and arr[j+1]
        int temp = arr[j];
        arr[j] = arr[j + 1];
        arr[j + 1] = temp;
      }
    }
  }
}"""

app = FastAPI(title="Complexity Narrator Web Interface")

# Mount static files
app.mount("/static", StaticFiles(directory=os.path.join(WEB_DIR, "static")), name="static")

# JSON endpoints used by the page script
app.mount("/api", api_app)

# Templates
templates = Jinja2Templates(directory=os.path.join(WEB_DIR, "templates"))


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Editor page preloaded with the sample program."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "sample_code": SAMPLE_CODE,
            "sample_markup": highlight_markup(SAMPLE_CODE, DEFAULT_LANGUAGE),
            "language": DEFAULT_LANGUAGE,
        },
    )


@app.get("/highlight.css", response_class=PlainTextResponse)
async def highlight_css() -> PlainTextResponse:
    """Pygments token styles for the overlay and the output panel."""
    return PlainTextResponse(stylesheet(), media_type="text/css")
